"""Parse free-form model replies into schema-conforming records."""

import json
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from clinic_recruit_ai.schemas.extraction_schema import ExtractionSchema, SchemaKind
from clinic_recruit_ai.utils.errors import PipelineError
from clinic_recruit_ai.utils.logger import get_logger

logger = get_logger(__name__)

_FENCED_BLOCK = re.compile(r"```(?:[A-Za-z0-9_-]+)?[ \t]*\n?([\s\S]*?)```")


def extract_json_text(text: str) -> str:
    """Inner content of the first fenced code block, or the whole reply when there is none."""
    match = _FENCED_BLOCK.search(text or "")
    if match:
        return match.group(1).strip()
    return (text or "").strip()


def _decode_embedded(text: str) -> Any:
    """Decode the first JSON value that starts at the first '{' or '['."""
    starts = [i for i in (text.find("{"), text.find("[")) if i != -1]
    if not starts:
        raise ValueError("no JSON value in reply")
    value, _ = json.JSONDecoder().raw_decode(text, min(starts))
    return value


def decode_model_json(text: str) -> Any:
    """
    Stage one: generic JSON decode. Tolerates a code fence (with or without a
    language tag) and prose around an unfenced object. Raises UnparsableResponse.
    """
    candidate = extract_json_text(text)
    try:
        return json.loads(candidate)
    except (ValueError, RecursionError):
        pass
    try:
        return _decode_embedded(candidate)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and over-long integer literals
        logger.warning("Model reply is not JSON: %s", str(e))
        raise PipelineError.unparsable_response() from e


def conform_to_schema(data: Any, schema: ExtractionSchema) -> BaseModel:
    """
    Stage two: validate against the schema's record model. Out-of-schema
    values are coerced to null by the model; only a wrongly shaped top level fails.
    """
    if isinstance(data, list) and schema.kind is SchemaKind.COMPETITOR:
        data = {"conditions": data}
    if not isinstance(data, dict):
        logger.warning("Model reply for %s is a JSON %s, not an object", schema.kind.value, type(data).__name__)
        raise PipelineError.unparsable_response()
    try:
        return schema.record_model.model_validate(data)
    except (ValidationError, RecursionError) as e:
        logger.warning("Model reply failed %s schema validation: %s", schema.kind.value, e)
        raise PipelineError.unparsable_response() from e


def parse_model_reply(text: str, schema: ExtractionSchema) -> BaseModel:
    """Decode and conform a model reply. Raises PipelineError(UnparsableResponse)."""
    return conform_to_schema(decode_model_json(text), schema)
