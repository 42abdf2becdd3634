import asyncio
import json

import httpx
import pytest
from openai import APIConnectionError

from clinic_recruit_ai.schemas.extraction_schema import COMPETITOR_SCHEMA, POSITION_SCHEMA
from clinic_recruit_ai.services.inference_client import (
    DegradingInferenceClient,
    DemoInferenceClient,
    LiveInferenceClient,
    build_inference_client,
)
from clinic_recruit_ai.utils.errors import ErrorKind, PipelineError
from conftest import FakeOpenAI


def _connection_error() -> APIConnectionError:
    return APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))


def test_missing_credential_selects_demo_client() -> None:
    assert isinstance(build_inference_client(api_key=""), DemoInferenceClient)


def test_credential_selects_live_client() -> None:
    client = build_inference_client(api_key="sk-test", degrade_to_demo=False)

    assert isinstance(client, LiveInferenceClient)


def test_degrade_option_wraps_live_client() -> None:
    client = build_inference_client(api_key="sk-test", degrade_to_demo=True)

    assert isinstance(client, DegradingInferenceClient)
    assert isinstance(client.inner, LiveInferenceClient)


@pytest.mark.parametrize("schema", [POSITION_SCHEMA, COMPETITOR_SCHEMA])
def test_demo_client_returns_fixed_record(schema) -> None:
    client = DemoInferenceClient()

    first = asyncio.run(client.complete("prompt", schema))
    second = asyncio.run(client.complete("another prompt", schema))

    assert first.demo
    assert first == second
    assert json.loads(first.text) == schema.demo_record


def test_live_client_sends_prompt_with_output_limit() -> None:
    fake = FakeOpenAI(content='{"title": "看護師"}')
    client = LiveInferenceClient(api_key="sk-test", model="gpt-4o-mini", max_tokens=4096, client=fake)

    reply = asyncio.run(client.complete("PROMPT", POSITION_SCHEMA))

    assert reply.text == '{"title": "看護師"}'
    assert not reply.demo
    call = fake.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["max_tokens"] == 4096
    assert call["messages"] == [{"role": "user", "content": "PROMPT"}]


def test_backend_error_is_inference_failed() -> None:
    client = LiveInferenceClient(api_key="sk-test", client=FakeOpenAI(error=_connection_error()))

    with pytest.raises(PipelineError) as exc:
        asyncio.run(client.complete("PROMPT", POSITION_SCHEMA))

    assert exc.value.kind is ErrorKind.INFERENCE_FAILED
    assert exc.value.http_status == 500


def test_empty_reply_is_inference_failed() -> None:
    client = LiveInferenceClient(api_key="sk-test", client=FakeOpenAI(content=None))

    with pytest.raises(PipelineError) as exc:
        asyncio.run(client.complete("PROMPT", POSITION_SCHEMA))

    assert exc.value.kind is ErrorKind.INFERENCE_FAILED


def test_deadline_expiry_is_inference_failed() -> None:
    client = LiveInferenceClient(api_key="sk-test", timeout_seconds=0.05, client=FakeOpenAI(delay=5))

    with pytest.raises(PipelineError) as exc:
        asyncio.run(client.complete("PROMPT", POSITION_SCHEMA))

    assert exc.value.kind is ErrorKind.INFERENCE_FAILED


def test_degrading_client_falls_back_to_demo_record() -> None:
    live = LiveInferenceClient(api_key="sk-test", client=FakeOpenAI(error=_connection_error()))

    reply = asyncio.run(DegradingInferenceClient(live).complete("PROMPT", COMPETITOR_SCHEMA))

    assert reply.demo
    assert json.loads(reply.text) == COMPETITOR_SCHEMA.demo_record


def test_degrading_client_passes_live_reply_through() -> None:
    live = LiveInferenceClient(api_key="sk-test", client=FakeOpenAI(content='{"title": "医療事務"}'))

    reply = asyncio.run(DegradingInferenceClient(live).complete("PROMPT", POSITION_SCHEMA))

    assert not reply.demo
    assert reply.text == '{"title": "医療事務"}'
