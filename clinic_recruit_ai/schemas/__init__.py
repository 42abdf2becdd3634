"""Schema exports."""

from .documents import ExtractedRecord, ExtractionRequest, ExtractionResult, RawPage, SanitizedDocument
from .extraction_schema import (
    COMPETITOR_SCHEMA,
    EXTRACTION_SCHEMAS,
    POSITION_SCHEMA,
    ExtractionSchema,
    SchemaKind,
    get_extraction_schema,
)
from .records import CompetitorCondition, CompetitorRecord, EmploymentType, PositionRecord

__all__ = [
    "SchemaKind",
    "ExtractionSchema",
    "POSITION_SCHEMA",
    "COMPETITOR_SCHEMA",
    "EXTRACTION_SCHEMAS",
    "get_extraction_schema",
    "ExtractionRequest",
    "RawPage",
    "SanitizedDocument",
    "ExtractionResult",
    "ExtractedRecord",
    "PositionRecord",
    "CompetitorRecord",
    "CompetitorCondition",
    "EmploymentType",
]
