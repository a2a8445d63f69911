"""Report Schemas — request payloads and the read-model projection.

Invariants:
    - CreateReportDto/UpdateReportDto: name 1-200 chars, description 1-1000 chars,
      both stripped and non-blank
    - ReportDto.created_at is a long-date string, never a datetime
    - to_report_dto is the only Report -> ReportDto conversion
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

LONG_DATE_FORMAT = "%A, %d %B %Y"


def format_long_date(value: datetime) -> str:
    """Render a timestamp as e.g. 'Monday, 15 June 2009'."""
    return value.strftime(LONG_DATE_FORMAT)


class ReportDto(BaseModel):
    """Read-model projection of a persisted report."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    created_at: str

    @field_validator("created_at", mode="before")
    @classmethod
    def long_date(cls, v):
        if isinstance(v, datetime):
            return format_long_date(v)
        return v


class _ReportPayload(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=1000)

    @field_validator("name", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class CreateReportDto(_ReportPayload):
    """Report creation payload: owner plus content."""
    user_id: int = Field(gt=0)


class UpdateReportDto(_ReportPayload):
    """Report update payload; only name and description are mutable."""
    id: int = Field(gt=0)


def to_report_dto(report) -> ReportDto:
    """Map a Report entity (or any object with the same attributes) to ReportDto."""
    return ReportDto.model_validate(report)
