"""
Summary statistics and date formatting shared by the report renderers.
"""

from datetime import date, datetime
from typing import Optional, Sequence

from ..models import Memo, ReportConfig, ReportSummary


def format_display_date(value: str) -> str:
    """
    Format an ISO date the way a US-locale browser would (``M/D/YYYY``).

    Values that are not valid calendar dates are returned unchanged.
    """
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_generated_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


def count_unique_senders(memos: Sequence[Memo]) -> int:
    return len({memo.sender for memo in memos})


def count_unique_recipients(memos: Sequence[Memo]) -> int:
    return len({memo.recipient for memo in memos})


def summarize(
    memos: Sequence[Memo],
    config: ReportConfig,
    generated_at: Optional[datetime] = None,
) -> ReportSummary:
    """
    Compute the report summary over an already filtered subset.

    Args:
        memos: Filtered memos
        config: Report configuration (for the period label)
        generated_at: Generation time, defaults to now

    Returns:
        ReportSummary: Totals and distinct sender/recipient counts
    """
    return ReportSummary(
        total_memos=len(memos),
        unique_senders=count_unique_senders(memos),
        unique_recipients=count_unique_recipients(memos),
        period=config.period_label,
        generated_at=generated_at or datetime.now().astimezone(),
    )
