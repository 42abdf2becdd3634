"""Extraction schemas: everything that differs between position and competitor imports."""

from enum import Enum
from typing import Type

from pydantic import BaseModel, ConfigDict, Field

from clinic_recruit_ai.config import COMPETITOR_MAX_CHARS, POSITION_MAX_CHARS
from clinic_recruit_ai.schemas.demo_records import DEMO_COMPETITOR_RECORD, DEMO_POSITION_RECORD
from clinic_recruit_ai.schemas.prompt_templates import COMPETITOR_PROMPT_TEMPLATE, POSITION_PROMPT_TEMPLATE
from clinic_recruit_ai.schemas.records import CompetitorRecord, PositionRecord


class SchemaKind(str, Enum):
    POSITION = "position"
    COMPETITOR = "competitor"


class ExtractionSchema(BaseModel):
    """Fixed, versioned description of one record shape and how to obtain it."""

    model_config = ConfigDict(frozen=True)

    kind: SchemaKind
    version: int = 1
    record_model: Type[BaseModel] = Field(..., description="Pydantic model the reply must conform to")
    prompt_template: str
    max_chars: int = Field(..., description="Sanitized text beyond this many characters is truncated")
    strip_layout: bool = Field(default=False, description="Also drop <nav>, <header> and <footer> blocks")
    demo_record: dict = Field(..., description="Schema-valid record returned on the demo path")

    @property
    def field_names(self) -> list:
        """Wire (camelCase) names of the top-level record fields."""
        return list(self.record_model().model_dump(by_alias=True).keys())


POSITION_SCHEMA = ExtractionSchema(
    kind=SchemaKind.POSITION,
    record_model=PositionRecord,
    prompt_template=POSITION_PROMPT_TEMPLATE,
    max_chars=POSITION_MAX_CHARS,
    strip_layout=True,
    demo_record=DEMO_POSITION_RECORD,
)

COMPETITOR_SCHEMA = ExtractionSchema(
    kind=SchemaKind.COMPETITOR,
    record_model=CompetitorRecord,
    prompt_template=COMPETITOR_PROMPT_TEMPLATE,
    max_chars=COMPETITOR_MAX_CHARS,
    demo_record=DEMO_COMPETITOR_RECORD,
)

EXTRACTION_SCHEMAS: dict = {
    SchemaKind.POSITION: POSITION_SCHEMA,
    SchemaKind.COMPETITOR: COMPETITOR_SCHEMA,
}


def get_extraction_schema(kind) -> ExtractionSchema:
    """Look up the schema for a SchemaKind or its string value. Raises ValueError if unknown."""
    return EXTRACTION_SCHEMAS[SchemaKind(kind)]
