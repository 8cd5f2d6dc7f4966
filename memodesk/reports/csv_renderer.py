"""
CSV report renderer.

Every value is wrapped in double quotes as-is. Embedded quotes and line
breaks are not escaped, so such values do not survive a round trip through a
standard CSV reader.
"""

from typing import Optional, Sequence

from ..models import Memo, ReportConfig

CSV_HEADERS = ("Subject", "From", "To", "Received Date", "Data Dispatcher", "Content")


def _quote(value: str) -> str:
    return f'"{value}"'


def render_csv_row(memo: Memo) -> str:
    return ",".join(_quote(value) for value in (
        memo.subject,
        memo.sender,
        memo.recipient,
        memo.received_date or "",
        memo.data_dispatcher or "",
        memo.content or "",
    ))


def render_csv_report(memos: Sequence[Memo], config: Optional[ReportConfig] = None) -> str:
    """
    Render the filtered memos as CSV text, one row per memo after the header.

    ``config`` is accepted for symmetry with the HTML renderer; the CSV
    layout does not depend on it.
    """
    lines = [",".join(CSV_HEADERS)]
    lines.extend(render_csv_row(memo) for memo in memos)
    return "\n".join(lines)
