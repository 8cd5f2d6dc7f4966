"""
Memo List - read view over the memo store.
"""

import logging
from typing import Callable, Iterable, Optional

from ..models import EmptyState, Memo, MemoListView, MemoSummary
from ..reports.summary import format_display_date
from ..storage import MemoStore

logger = logging.getLogger(__name__)

EMPTY_STATE = EmptyState(
    title="No Memos Yet",
    description="Create your first memo using the form above or import from CSV to get started.",
)


def count_label(count: int) -> str:
    return f"{count} {'memo' if count == 1 else 'memos'}"


def summarize_memo(memo: Memo) -> MemoSummary:
    values = memo.model_dump()
    if memo.received_date:
        values["display_date"] = format_display_date(memo.received_date)
    return MemoSummary(**values)


def build_memo_list(memos: Iterable[Memo]) -> MemoListView:
    """
    Build the list view in the given order.

    Returns:
        MemoListView: Empty state when there is no memo, one summary per memo otherwise
    """
    entries = [summarize_memo(memo) for memo in memos]
    return MemoListView(
        count=len(entries),
        label=count_label(len(entries)),
        empty_state=None if entries else EMPTY_STATE,
        memos=entries,
    )


class MemoSelector:
    """Resolves a selected list entry and notifies an optional callback."""

    def __init__(self, store: MemoStore, on_select: Optional[Callable[[Memo], None]] = None):
        self.store = store
        self.on_select = on_select

    def select(self, memo_id: str) -> Optional[Memo]:
        memo = self.store.get(memo_id)
        if memo is not None and self.on_select is not None:
            self.on_select(memo)
        return memo
