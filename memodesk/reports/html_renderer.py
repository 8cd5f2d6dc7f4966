"""
HTML report renderer.

Produces one self-contained document: every style rule is inlined in a
<style> block and no script, font or image is referenced, so the file can be
archived, emailed or printed as-is. Memo text is HTML-escaped.
"""

from datetime import datetime
from html import escape
from typing import Optional, Sequence

from ..models import Memo, ReportConfig
from .summary import format_display_date, format_generated_date, summarize

DEFAULT_TITLE = "Memo System Report"
DEFAULT_FOOTER = "Generated by Memo Management System"

REPORT_STYLES = """
        body { font-family: Arial, sans-serif; margin: 40px; background: #f8fafc; }
        .header { background: #3b82f6; color: white; padding: 20px; border-radius: 8px; margin-bottom: 30px; }
        .header h1 { margin: 0; font-size: 24px; }
        .header p { margin: 5px 0 0 0; opacity: 0.9; }
        .summary { background: white; padding: 20px; border-radius: 8px; margin-bottom: 30px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        .memo-card { background: white; border: 1px solid #e2e8f0; border-radius: 8px; padding: 20px; margin-bottom: 15px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        .memo-header { border-bottom: 1px solid #e2e8f0; padding-bottom: 10px; margin-bottom: 15px; }
        .memo-title { font-size: 18px; font-weight: bold; color: #1e293b; margin: 0 0 5px 0; }
        .memo-meta { color: #64748b; font-size: 14px; }
        .memo-content { color: #475569; line-height: 1.6; white-space: pre-wrap; }
        .stats { display: flex; gap: 20px; margin-bottom: 20px; }
        .stat { background: #f1f5f9; padding: 15px; border-radius: 6px; text-align: center; flex: 1; }
        .stat-number { font-size: 24px; font-weight: bold; color: #3b82f6; }
        .stat-label { color: #64748b; font-size: 14px; margin-top: 5px; }
        .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #e2e8f0; text-align: center; color: #64748b; font-size: 12px; }
        @media print { body { margin: 20px; } }
"""


def _render_stat(value: int, label: str) -> str:
    return f"""
            <div class="stat">
                <div class="stat-number">{value}</div>
                <div class="stat-label">{label}</div>
            </div>"""


def render_memo_block(memo: Memo) -> str:
    """Detail block for one memo; dispatcher and content only when present."""
    received = format_display_date(memo.received_date) if memo.received_date else "Not specified"

    meta = (
        f"<strong>From:</strong> {escape(memo.sender)} | "
        f"<strong>To:</strong> {escape(memo.recipient)} | "
        f"<strong>Date:</strong> {escape(received)}"
    )
    if memo.data_dispatcher:
        meta += f" | <strong>Dispatcher:</strong> {escape(memo.data_dispatcher)}"

    content = f'\n                <div class="memo-content">{escape(memo.content)}</div>' if memo.content else ""

    return f"""
            <div class="memo-card">
                <div class="memo-header">
                    <h3 class="memo-title">{escape(memo.subject)}</h3>
                    <div class="memo-meta">{meta}</div>
                </div>{content}
            </div>"""


def render_html_report(
    memos: Sequence[Memo],
    config: ReportConfig,
    generated_at: Optional[datetime] = None,
    title: str = DEFAULT_TITLE,
    footer: str = DEFAULT_FOOTER,
) -> str:
    """
    Render the filtered memos as a complete HTML document.

    Args:
        memos: Memos that passed the report filters, in report order
        config: Report configuration (period shown in the summary)
        generated_at: Generation time shown in header and footer, defaults to now
        title: Document heading
        footer: Footer caption

    Returns:
        str: The HTML document
    """
    summary = summarize(memos, config, generated_at)
    generated_on = format_generated_date(summary.generated_at)

    stats = "".join([
        _render_stat(summary.total_memos, "Total Memos"),
        _render_stat(summary.unique_senders, "Unique Senders"),
        _render_stat(summary.unique_recipients, "Unique Recipients"),
    ])
    details = "".join(render_memo_block(memo) for memo in memos)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} - {generated_on}</title>
    <style>{REPORT_STYLES}    </style>
</head>
<body>
    <div class="header">
        <h1>{escape(title)}</h1>
        <p>Generated on {generated_on} | Total Memos: {summary.total_memos}</p>
    </div>

    <div class="summary">
        <h2>Report Summary</h2>
        <div class="stats">{stats}
        </div>
        <p><strong>Report Period:</strong> {escape(summary.period)}</p>
    </div>

    <div class="memos-section">
        <h2>Memo Details</h2>{details}
    </div>

    <div class="footer">
        <p>{escape(footer)} - {generated_on}</p>
    </div>
</body>
</html>
"""
