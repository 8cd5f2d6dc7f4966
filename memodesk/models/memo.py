"""
Memo Models - The memo record, its creation payload and the list view.

JSON keys follow the browser form (``from``, ``to``, ``receivedDate``,
``dataDispatcher``); Python code uses the snake_case attribute names.
"""

import re
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def check_iso_date(value: str) -> str:
    """Accept an empty string or a ``YYYY-MM-DD`` string, reject anything else."""
    if value and not ISO_DATE_PATTERN.match(value):
        raise ValueError("date must be formatted as YYYY-MM-DD")
    return value


class MemoBase(BaseModel):
    """Fields shared by the creation payload and the stored memo."""
    subject: str = ""
    sender: str = Field(default="", alias="from")
    recipient: str = Field(default="", alias="to")
    received_date: str = Field(default="", alias="receivedDate")  # YYYY-MM-DD or ""
    data_dispatcher: str = Field(default="", alias="dataDispatcher")
    content: str = ""

    @field_validator(
        "subject", "sender", "recipient", "received_date", "data_dispatcher", "content",
        mode="before",
    )
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("received_date")
    @classmethod
    def received_date_is_iso(cls, value: str) -> str:
        return check_iso_date(value)

    class Config:
        populate_by_name = True


class MemoCreate(MemoBase):
    """
    Creation payload submitted by the memo form.

    Required fields default to empty so that a missing subject reaches the
    form validation instead of failing schema parsing.
    """


class Memo(MemoBase):
    """A created memo. Never mutated after creation."""
    id: str

    class Config:
        populate_by_name = True
        frozen = True


class Notification(BaseModel):
    """Transient user-facing message (rendered as a toast by the browser)."""
    title: str
    description: str
    variant: Optional[str] = None  # "destructive" for errors


class MemoCreated(BaseModel):
    """Response to a successful memo submission."""
    memo: Memo
    notification: Notification


class MemoSummary(Memo):
    """One entry of the memo list."""
    display_date: Optional[str] = Field(default=None, alias="displayDate")


class EmptyState(BaseModel):
    """Message shown instead of the list when no memo exists."""
    title: str
    description: str


class MemoListView(BaseModel):
    """Read view over the memo store, in store order."""
    count: int
    label: str
    empty_state: Optional[EmptyState] = Field(default=None, alias="emptyState")
    memos: List[MemoSummary] = []

    class Config:
        populate_by_name = True


class CsvImportResult(BaseModel):
    """Acknowledgement of an uploaded CSV file. Nothing is imported."""
    filename: Optional[str] = None
    headers: List[str] = []
    record_count: int = Field(alias="recordCount")
    notification: Notification

    class Config:
        populate_by_name = True
