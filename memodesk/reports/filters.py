"""
Report filters - select the memos that go into a report.

Dates are compared as ISO strings, so ``"2024-03-05" >= "2024-02-01"`` holds
lexicographically. A memo without a received date is never excluded by a
date bound.
"""

import logging
from typing import Iterable, List

from ..models import Memo, ReportConfig

logger = logging.getLogger(__name__)


def in_date_range(received_date: str, date_from: str = "", date_to: str = "") -> bool:
    """
    Check a received date against inclusive, optional bounds.

    Args:
        received_date: ISO date of the memo, or "" when unknown
        date_from: Lower bound, "" for none
        date_to: Upper bound, "" for none

    Returns:
        bool: True if the memo passes every supplied bound
    """
    if not received_date:
        return True
    if date_from and received_date < date_from:
        return False
    if date_to and received_date > date_to:
        return False
    return True


def filter_memos(
    memos: Iterable[Memo],
    date_from: str = "",
    date_to: str = "",
    filter_by: str = "all",
) -> List[Memo]:
    """
    Return the memos inside ``[date_from, date_to]``, keeping their order.

    ``filter_by`` ("all", "recent", "urgent") is accepted for the report
    configuration but does not narrow the result.
    """
    if filter_by != "all":
        logger.debug(f"Category filter '{filter_by}' has no effect on the selection")

    return [
        memo for memo in memos
        if in_date_range(memo.received_date, date_from, date_to)
    ]


def apply_report_filters(memos: Iterable[Memo], config: ReportConfig) -> List[Memo]:
    """Run ``filter_memos`` with the bounds of a report configuration."""
    return filter_memos(memos, config.date_from, config.date_to, config.filter_by)
