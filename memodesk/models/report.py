"""
Report Models - Report configuration, summary statistics and the download triple.
"""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field, field_validator

from .memo import check_iso_date

FilterBy = Literal["all", "recent", "urgent"]
ReportFormat = Literal["html", "csv"]


class ReportConfig(BaseModel):
    """
    Report configuration chosen in the Reports tab.

    ``date_from``/``date_to`` are inclusive ISO bounds, empty meaning unbounded.
    ``filter_by`` is accepted and carried but does not narrow the selection.
    """
    date_from: str = Field(default="", alias="dateFrom")
    date_to: str = Field(default="", alias="dateTo")
    filter_by: FilterBy = Field(default="all", alias="filterBy")
    report_format: ReportFormat = Field(default="html", alias="format")

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("date_from", "date_to")
    @classmethod
    def bounds_are_iso(cls, value: str) -> str:
        return check_iso_date(value)

    @property
    def period_label(self) -> str:
        return f"{self.date_from or 'All time'} to {self.date_to or 'Present'}"

    class Config:
        populate_by_name = True


class ReportSummary(BaseModel):
    """Summary statistics over a filtered memo subset."""
    total_memos: int = Field(alias="totalMemos")
    unique_senders: int = Field(alias="uniqueSenders")
    unique_recipients: int = Field(alias="uniqueRecipients")
    period: str
    generated_at: datetime = Field(alias="generatedAt")

    class Config:
        populate_by_name = True


class ReportDownload(BaseModel):
    """A rendered document ready to be handed to an exporter."""
    content: str
    mime_type: str
    filename: str
    memo_count: int = 0
