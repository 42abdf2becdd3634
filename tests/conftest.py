"""Shared fixtures: sample pages, a counting fetcher, and a stand-in OpenAI client."""

import asyncio
from types import SimpleNamespace
from typing import List, Optional

import pytest

from clinic_recruit_ai.schemas.documents import RawPage
from clinic_recruit_ai.schemas.extraction_schema import ExtractionSchema
from clinic_recruit_ai.services.inference_client import InferenceClient, InferenceReply

POSITION_PAGE_HTML = """
<html>
  <head>
    <title>歯科衛生士募集｜さくら歯科クリニック</title>
    <style>body { font-family: sans-serif; }</style>
    <script>window.dataLayer = [];</script>
  </head>
  <body>
    <nav><ul><li>トップ</li><li>医院紹介</li></ul></nav>
    <h1>歯科衛生士（常勤）募集</h1>
    <p>月給25万円〜38万円</p>
    <div>仕事内容: 一般歯科治療における歯科衛生士業務全般。予防歯科処置（スケーリング、PMTC、フッ素塗布）、歯科保健指導、診療補助、口腔内写真撮影をお任せします。</div>
    <ul>
      <li>社会保険完備</li>
      <li>交通費支給（月3万円まで）</li>
      <li>制服貸与</li>
    </ul>
    <p>応募資格: 歯科衛生士免許をお持ちの方。臨床経験2年以上の方歓迎。ブランクのある方も相談可。</p>
    <p>勤務時間: 9:00〜18:00（休憩60分）<br>休日: 日曜・祝日、水曜午後、夏季休暇、年末年始休暇</p>
    <footer>&copy; さくら歯科クリニック</footer>
  </body>
</html>
"""

JS_SHELL_HTML = """
<html><head><script src="/static/app.js"></script></head>
<body><div id="root"></div><script>render(document.getElementById("root"));</script></body></html>
"""


class CountingFetcher:
    """Fetcher stand-in that records every URL it is asked for."""

    def __init__(self, html: str = POSITION_PAGE_HTML, error: Optional[Exception] = None) -> None:
        self.html = html
        self.error = error
        self.calls: List[str] = []

    async def __call__(self, url: str) -> RawPage:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return RawPage(url=url, status_code=200, text=self.html)


class ScriptedInferenceClient(InferenceClient):
    """Inference stand-in returning a fixed reply and recording prompts."""

    def __init__(self, reply: str = "{}", demo: bool = False, error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.demo = demo
        self.error = error
        self.prompts: List[str] = []

    async def complete(self, prompt: str, schema: ExtractionSchema) -> InferenceReply:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return InferenceReply(text=self.reply, demo=self.demo)


class _FakeCompletions:
    def __init__(self, content: Optional[str], error: Optional[Exception], delay: float) -> None:
        self.content = content
        self.error = error
        self.delay = delay
        self.calls: List[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Mimics the slice of AsyncOpenAI used by LiveInferenceClient."""

    def __init__(self, content: Optional[str] = "{}", error: Optional[Exception] = None, delay: float = 0.0) -> None:
        self.chat = SimpleNamespace(completions=_FakeCompletions(content, error, delay))

    @property
    def calls(self) -> List[dict]:
        return self.chat.completions.calls


@pytest.fixture
def position_html() -> str:
    return POSITION_PAGE_HTML


@pytest.fixture
def counting_fetcher() -> CountingFetcher:
    return CountingFetcher()
