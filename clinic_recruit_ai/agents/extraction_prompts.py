"""Prompt construction for URL extraction."""

from clinic_recruit_ai.schemas.documents import SanitizedDocument
from clinic_recruit_ai.schemas.extraction_schema import ExtractionSchema


def build_prompt(schema: ExtractionSchema, doc: SanitizedDocument) -> str:
    """Schema-specific instructions followed by the sanitized page text, verbatim."""
    return schema.prompt_template + doc.text
