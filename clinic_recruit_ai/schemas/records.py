"""Structured records produced by URL extraction, one model per extraction schema."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from clinic_recruit_ai.utils.helpers import coerce_text, coerce_yen_amount


class EmploymentType(str, Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"


# Japanese labels the model sometimes returns instead of the enum value
EMPLOYMENT_TYPE_LABELS: dict = {
    "常勤": EmploymentType.FULL_TIME,
    "正社員": EmploymentType.FULL_TIME,
    "パート": EmploymentType.PART_TIME,
    "アルバイト": EmploymentType.PART_TIME,
    "パート・アルバイト": EmploymentType.PART_TIME,
    "契約": EmploymentType.CONTRACT,
    "契約社員": EmploymentType.CONTRACT,
}


class _RecordModel(BaseModel):
    """Base for extracted records: camelCase on the wire, unknown keys dropped."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Every field, camelCase keys, enums as plain strings."""
        return self.model_dump(by_alias=True, mode="json")


class PositionRecord(_RecordModel):
    """A job posting as it would pre-fill the position form."""

    title: Optional[str] = Field(default=None, description="Job title, e.g. 歯科衛生士")
    employment_type: Optional[EmploymentType] = Field(default=None, description="FULL_TIME, PART_TIME or CONTRACT")
    salary_min: Optional[int] = Field(default=None, description="Monthly salary lower bound in yen")
    salary_max: Optional[int] = Field(default=None, description="Monthly salary upper bound in yen")
    hourly_rate_min: Optional[int] = Field(default=None, description="Hourly rate lower bound in yen")
    hourly_rate_max: Optional[int] = Field(default=None, description="Hourly rate upper bound in yen")
    description: Optional[str] = Field(default=None, description="Duties and work content")
    requirements: Optional[str] = Field(default=None, description="Required licences and experience")
    benefits: Optional[str] = Field(default=None, description="Benefits and perks")

    @field_validator("salary_min", "salary_max", "hourly_rate_min", "hourly_rate_max", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Optional[int]:
        return coerce_yen_amount(value)

    @field_validator("title", "description", "requirements", "benefits", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("employment_type", mode="before")
    @classmethod
    def _employment_type(cls, value: Any) -> Optional[EmploymentType]:
        if isinstance(value, EmploymentType):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in EmploymentType.__members__:
            return EmploymentType[key]
        return EMPLOYMENT_TYPE_LABELS.get(value.strip())


class CompetitorCondition(_RecordModel):
    """Recruiting terms for one role/employment-form combination at a competitor clinic."""

    job_title: Optional[str] = Field(default=None, description="Role including employment form, e.g. 歯科衛生士(常勤)")
    salary_min: Optional[int] = Field(default=None, description="Monthly salary lower bound in yen")
    salary_max: Optional[int] = Field(default=None, description="Monthly salary upper bound in yen")
    hourly_rate_min: Optional[int] = Field(default=None, description="Hourly rate lower bound in yen")
    hourly_rate_max: Optional[int] = Field(default=None, description="Hourly rate upper bound in yen")
    benefits: Optional[str] = Field(default=None)
    working_hours: Optional[str] = Field(default=None)
    holidays: Optional[str] = Field(default=None)
    source: Optional[str] = Field(default=None, description="Job board or site the terms were published on")

    @model_validator(mode="before")
    @classmethod
    def _single_hourly_rate(cls, data: Any) -> Any:
        # Older prompts asked for one "hourlyRate"; spread it over the range
        if isinstance(data, dict) and "hourlyRate" in data:
            if data.get("hourlyRateMin") is None and data.get("hourlyRateMax") is None:
                data = dict(data)
                data["hourlyRateMin"] = data["hourlyRate"]
                data["hourlyRateMax"] = data["hourlyRate"]
        return data

    @field_validator("salary_min", "salary_max", "hourly_rate_min", "hourly_rate_max", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Optional[int]:
        return coerce_yen_amount(value)

    @field_validator("job_title", "benefits", "working_hours", "holidays", "source", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)


class CompetitorRecord(_RecordModel):
    """A competitor clinic and every recruiting condition found on its page."""

    clinic_name: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    website: Optional[str] = Field(default=None)
    conditions: List[CompetitorCondition] = Field(default_factory=list)

    @field_validator("clinic_name", "address", "website", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("conditions", mode="before")
    @classmethod
    def _conditions(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]
