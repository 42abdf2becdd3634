"""Values passed between pipeline stages during one extraction run."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from clinic_recruit_ai.schemas.extraction_schema import SchemaKind
from clinic_recruit_ai.schemas.records import CompetitorRecord, PositionRecord

ExtractedRecord = Union[PositionRecord, CompetitorRecord]


class ExtractionRequest(BaseModel):
    """One caller request: which URL, which record shape."""

    model_config = ConfigDict(frozen=True)

    source_url: str = Field(..., description="URL supplied by the caller, unvalidated")
    schema_kind: SchemaKind = Field(..., description="position or competitor")


class RawPage(BaseModel):
    """Decoded body of a successful fetch."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Final URL after redirects")
    status_code: int
    text: str
    content_truncated: bool = Field(default=False, description="Body exceeded the byte cap and was cut")


class SanitizedDocument(BaseModel):
    """Plain-text approximation of a page's visible content."""

    model_config = ConfigDict(frozen=True)

    text: str
    original_length: int = Field(..., description="Length of the reduced text before truncation")
    truncated: bool = False


class ExtractionResult(BaseModel):
    """Successful outcome of a pipeline run."""

    record: ExtractedRecord
    source_url: str
    demo: bool = Field(default=False, description="True when the offline demo record was returned")

    def to_response(self) -> dict:
        body = {"extractedData": self.record.to_wire(), "sourceUrl": self.source_url}
        if self.demo:
            body["demo"] = True
        return body
