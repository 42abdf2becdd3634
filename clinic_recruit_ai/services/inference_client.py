"""Inference clients: a live OpenAI-compatible backend or a fixed demo record."""

import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel

from clinic_recruit_ai.config import (
    INFERENCE_DEGRADE_TO_DEMO,
    INFERENCE_MAX_TOKENS,
    INFERENCE_TEMPERATURE,
    INFERENCE_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
)
from clinic_recruit_ai.schemas.extraction_schema import ExtractionSchema
from clinic_recruit_ai.utils.errors import ErrorKind, PipelineError
from clinic_recruit_ai.utils.logger import get_logger

logger = get_logger(__name__)


class InferenceReply(BaseModel):
    """Raw model text and whether it came from the demo path."""

    text: str
    demo: bool = False


class InferenceClient(ABC):
    """Turns a prompt into free-form model text."""

    @abstractmethod
    async def complete(self, prompt: str, schema: ExtractionSchema) -> InferenceReply:
        """Return the model reply. Raises PipelineError(InferenceFailed) on any backend failure."""
        ...


class DemoInferenceClient(InferenceClient):
    """Offline stand-in used when no credential is configured. Never touches the network."""

    async def complete(self, prompt: str, schema: ExtractionSchema) -> InferenceReply:
        logger.info("No inference backend configured; returning demo %s record", schema.kind.value)
        return InferenceReply(text=json.dumps(schema.demo_record, ensure_ascii=False), demo=True)


class LiveInferenceClient(InferenceClient):
    """Chat-completions call against OpenAI or any OpenAI-compatible endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = MODEL_NAME,
        base_url: Optional[str] = None,
        timeout_seconds: float = INFERENCE_TIMEOUT_SECONDS,
        max_tokens: int = INFERENCE_MAX_TOKENS,
        temperature: float = INFERENCE_TEMPERATURE,
        client: Optional[Any] = None,
    ) -> None:
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.max_tokens = max_tokens
        self.temperature = temperature
        # Retries belong to the caller; the SDK must not retry on its own
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def complete(self, prompt: str, schema: ExtractionSchema) -> InferenceReply:
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.warning("Inference timed out after %ss (schema=%s)", self.timeout_seconds, schema.kind.value)
            raise PipelineError.inference_failed() from e
        except (OpenAIError, httpx.HTTPError) as e:
            logger.warning("Inference backend error (schema=%s): %s", schema.kind.value, str(e))
            raise PipelineError.inference_failed() from e

        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            logger.warning("Inference backend returned an empty reply (schema=%s)", schema.kind.value)
            raise PipelineError.inference_failed()
        return InferenceReply(text=choice.message.content, demo=False)


class DegradingInferenceClient(InferenceClient):
    """Falls back to the demo record when the wrapped live client fails."""

    def __init__(self, inner: InferenceClient, fallback: Optional[InferenceClient] = None) -> None:
        self.inner = inner
        self.fallback = fallback or DemoInferenceClient()

    async def complete(self, prompt: str, schema: ExtractionSchema) -> InferenceReply:
        try:
            return await self.inner.complete(prompt, schema)
        except PipelineError as e:
            if e.kind is not ErrorKind.INFERENCE_FAILED:
                raise
            logger.warning("Inference failed; degrading to demo %s record", schema.kind.value)
            return await self.fallback.complete(prompt, schema)


def build_inference_client(
    api_key: Optional[str] = None,
    degrade_to_demo: Optional[bool] = None,
) -> InferenceClient:
    """
    Pick the inference capability once, at construction time.
    A missing credential selects the demo client; it is not an error.
    """
    key = OPENAI_API_KEY if api_key is None else api_key
    if not key:
        return DemoInferenceClient()
    client: InferenceClient = LiveInferenceClient(api_key=key, base_url=OPENAI_BASE_URL)
    degrade = INFERENCE_DEGRADE_TO_DEMO if degrade_to_demo is None else degrade_to_demo
    if degrade:
        client = DegradingInferenceClient(client)
    return client
