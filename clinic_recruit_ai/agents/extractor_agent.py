"""Extractor Agent: fetch page, clean text, LLM extraction, return one structured record."""

from enum import Enum
from typing import Awaitable, Callable, Optional, Tuple

from clinic_recruit_ai.agents.extraction_prompts import build_prompt
from clinic_recruit_ai.config import MIN_CONTENT_CHARS
from clinic_recruit_ai.schemas.documents import ExtractionRequest, ExtractionResult, RawPage
from clinic_recruit_ai.schemas.extraction_schema import SchemaKind, get_extraction_schema
from clinic_recruit_ai.services.inference_client import InferenceClient, build_inference_client
from clinic_recruit_ai.services.page_fetcher import fetch_page
from clinic_recruit_ai.services.response_parser import parse_model_reply
from clinic_recruit_ai.services.text_cleaner import sanitize, truncate_document
from clinic_recruit_ai.utils.errors import PipelineError
from clinic_recruit_ai.utils.helpers import validate_source_url
from clinic_recruit_ai.utils.logger import get_logger

logger = get_logger(__name__)

Fetcher = Callable[[str], Awaitable[RawPage]]
ErrorHook = Callable[[PipelineError, ExtractionRequest], None]

UNKNOWN_SCHEMA_MESSAGE = "取り込み対象の種類が不正です"
UNEXPECTED_ERROR_MESSAGE = "求人情報の取り込みに失敗しました"


class PipelineStage(str, Enum):
    """Linear stages of one run; a failure jumps straight out of the current one."""

    START = "Start"
    URL_VALIDATED = "UrlValidated"
    FETCHED = "Fetched"
    SANITIZED = "Sanitized"
    PROMPT_BUILT = "PromptBuilt"
    INFERRED = "Inferred"
    PARSED = "Parsed"
    DONE = "Done"


def log_pipeline_error(error: PipelineError, request: ExtractionRequest) -> None:
    """Default error hook: one structured warning per failed run."""
    logger.warning(
        "Extraction failed: kind=%s status=%s stage=%s schema=%s url=%s",
        error.kind.value,
        error.http_status,
        error.stage,
        request.schema_kind.value,
        request.source_url,
        extra={
            "error_kind": error.kind.value,
            "http_status": error.http_status,
            "upstream_status": error.upstream_status,
            "stage": error.stage,
            "schema_kind": request.schema_kind.value,
            "source_url": request.source_url,
        },
    )


class ExtractionPipeline:
    """
    URL → fetch → sanitize → prompt → inference → parse, for either schema.

    The inference capability (live or demo) is fixed at construction; the
    pipeline itself never looks at credentials. Runs share no state, so one
    instance may serve concurrent requests.
    """

    def __init__(
        self,
        inference_client: Optional[InferenceClient] = None,
        fetcher: Fetcher = fetch_page,
        on_error: Optional[ErrorHook] = log_pipeline_error,
        min_content_chars: int = MIN_CONTENT_CHARS,
    ) -> None:
        self.inference_client = inference_client or build_inference_client()
        self.fetcher = fetcher
        self.on_error = on_error
        self.min_content_chars = min_content_chars

    async def extract(self, url: str, schema_kind) -> ExtractionResult:
        """
        Run every stage in order. Returns a complete record or raises
        PipelineError; never both. Raises ValueError for an unknown schema_kind.

        The URL is fetched with surrounding whitespace stripped, but the
        result echoes the caller's string unchanged as source_url.
        """
        schema = get_extraction_schema(schema_kind)
        stage = PipelineStage.START
        try:
            source_url = validate_source_url(url)
            stage = self._advance(PipelineStage.URL_VALIDATED, source_url)

            page = await self.fetcher(source_url)
            stage = self._advance(PipelineStage.FETCHED, source_url)

            doc = sanitize(page.text, strip_layout=schema.strip_layout)
            if len(doc.text) < self.min_content_chars:
                logger.warning("Only %s chars of text on %s", len(doc.text), source_url)
                raise PipelineError.insufficient_content()
            doc = truncate_document(doc, schema.max_chars)
            if doc.truncated:
                logger.info("Truncated %s chars of text to %s for %s", doc.original_length, schema.max_chars, source_url)
            stage = self._advance(PipelineStage.SANITIZED, source_url)

            prompt = build_prompt(schema, doc)
            stage = self._advance(PipelineStage.PROMPT_BUILT, source_url)

            reply = await self.inference_client.complete(prompt, schema)
            stage = self._advance(PipelineStage.INFERRED, source_url)

            record = parse_model_reply(reply.text, schema)
            stage = self._advance(PipelineStage.PARSED, source_url)
        except PipelineError as e:
            e.stage = stage.value
            raise

        self._advance(PipelineStage.DONE, source_url)
        logger.info("Extracted %s record from %s (demo=%s)", schema.kind.value, source_url, reply.demo)
        return ExtractionResult(record=record, source_url=url, demo=reply.demo)

    async def handle_extract_request(self, url: str, schema_kind) -> Tuple[int, dict]:
        """
        Caller-facing contract: (200, {"extractedData", "sourceUrl"[, "demo"]})
        or (status, {"error": message}) with the status chosen by error kind.
        """
        try:
            kind = SchemaKind(schema_kind)
        except ValueError:
            logger.warning("Unknown extraction schema %r", schema_kind)
            return 400, {"error": UNKNOWN_SCHEMA_MESSAGE}

        try:
            result = await self.extract(url, kind)
        except PipelineError as e:
            self._report(e, ExtractionRequest(source_url=url if isinstance(url, str) else "", schema_kind=kind))
            return e.http_status, e.to_body()
        except Exception:
            logger.exception("Unexpected failure extracting %s", url)
            return 500, {"error": UNEXPECTED_ERROR_MESSAGE}
        return 200, result.to_response()

    def _advance(self, stage: PipelineStage, url: str) -> PipelineStage:
        logger.debug("Extraction stage %s for %s", stage.value, url)
        return stage

    def _report(self, error: PipelineError, request: ExtractionRequest) -> None:
        if self.on_error is None:
            return
        try:
            self.on_error(error, request)
        except Exception:
            logger.exception("Error hook failed for %s", request.source_url)


async def run_extraction(url: str, schema_kind) -> Tuple[int, dict]:
    """Build a pipeline from configuration and handle one extraction request."""
    pipeline = ExtractionPipeline()
    return await pipeline.handle_extract_request(url, schema_kind)
