"""
Clinic Recruit AI – Streamlit preview of URL extraction.
No business logic in layout; the extraction pipeline does all the work.
"""

import asyncio
import json
from typing import Tuple

import streamlit as st

from clinic_recruit_ai.agents.extractor_agent import ExtractionPipeline
from clinic_recruit_ai.config import OPENAI_API_KEY
from clinic_recruit_ai.schemas.extraction_schema import SchemaKind

SCHEMA_LABELS = {
    SchemaKind.POSITION: "求人（自院の募集職種）",
    SchemaKind.COMPETITOR: "競合医院",
}


def _run_pipeline(url: str, schema_kind: SchemaKind) -> Tuple[int, dict]:
    """Run one extraction request on a private event loop."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        pipeline = ExtractionPipeline()
        return loop.run_until_complete(pipeline.handle_extract_request(url, schema_kind))
    finally:
        loop.close()


def render_layout() -> None:
    """Streamlit page layout: URL input, schema choice, extracted JSON or error."""
    st.set_page_config(page_title="Clinic Recruit AI – URL取り込み", layout="wide")
    st.title("URLから求人情報を取り込む")
    st.markdown("*求人媒体や競合医院の募集ページから、フォーム入力用の情報を抽出します。*")
    if not OPENAI_API_KEY:
        st.info("OPENAI_API_KEY が未設定のため、デモデータを返します。")
    st.divider()

    schema_kind = st.radio(
        "取り込み対象",
        options=list(SCHEMA_LABELS.keys()),
        format_func=lambda k: SCHEMA_LABELS[k],
        horizontal=True,
        key="schema_kind",
    )
    url = st.text_input("募集ページのURL", placeholder="https://example.com/recruit", key="source_url")
    extract_clicked = st.button("取り込む", type="primary", key="extract_btn")

    if "last_response" not in st.session_state:
        st.session_state["last_response"] = None

    if extract_clicked:
        with st.spinner("ページを取得して解析しています…"):
            st.session_state["last_response"] = _run_pipeline(url, schema_kind)

    last = st.session_state.get("last_response")
    if not last:
        return

    status, body = last
    if status != 200:
        st.error(f"{body.get('error')}（HTTP {status}）")
        return

    if body.get("demo"):
        st.warning("デモデータです。実際のページ内容は反映されていません。")
    st.caption(f"取得元: {body['sourceUrl']}")
    st.code(json.dumps(body["extractedData"], ensure_ascii=False, indent=2), language="json")


if __name__ == "__main__":
    render_layout()
