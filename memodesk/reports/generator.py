"""
Report Generator - filter the memo store, render the document, name the file.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..core.logging_config import LoggerAdapter
from ..models import Memo, ReportConfig, ReportDownload, ReportSummary
from .csv_renderer import render_csv_report
from .filters import apply_report_filters
from .html_renderer import DEFAULT_FOOTER, DEFAULT_TITLE, render_html_report
from .summary import summarize

FORMAT_MIME_TYPES = {
    "html": "text/html",
    "csv": "text/csv",
}


def report_filename(generated_at: datetime, extension: str) -> str:
    """``memo-report-<UTC ISO date>.<extension>``"""
    utc_date = generated_at.astimezone(timezone.utc).date().isoformat()
    return f"memo-report-{utc_date}.{extension}"


class ReportGenerator:
    """
    Owns one report configuration and turns a memo snapshot into a download.
    """

    def __init__(
        self,
        config: ReportConfig,
        title: str = DEFAULT_TITLE,
        footer: str = DEFAULT_FOOTER,
    ):
        """
        Args:
            config: Date bounds, category filter and output format
            title: Heading used by the HTML document
            footer: Footer caption used by the HTML document
        """
        self.config = config
        self.title = title
        self.footer = footer
        self.logger = LoggerAdapter(
            logging.getLogger(__name__),
            {"report_format": config.report_format, "filter_by": config.filter_by},
        )

    def select(self, memos: Iterable[Memo]) -> List[Memo]:
        """Memos that pass the configured filters, in store order."""
        return apply_report_filters(memos, self.config)

    def summarize(self, memos: Iterable[Memo], generated_at: Optional[datetime] = None) -> ReportSummary:
        return summarize(self.select(memos), self.config, generated_at)

    def render(self, selected: List[Memo], generated_at: datetime) -> str:
        if self.config.report_format == "html":
            return render_html_report(
                selected, self.config, generated_at, title=self.title, footer=self.footer
            )
        return render_csv_report(selected, self.config)

    def generate(self, memos: Iterable[Memo], generated_at: Optional[datetime] = None) -> ReportDownload:
        """
        Build the downloadable report for the current configuration.

        Args:
            memos: Snapshot of the memo store
            generated_at: Generation time, defaults to now

        Returns:
            ReportDownload: Document text, MIME type and file name
        """
        generated_at = generated_at or datetime.now().astimezone()
        selected = self.select(memos)
        extension = self.config.report_format

        download = ReportDownload(
            content=self.render(selected, generated_at),
            mime_type=FORMAT_MIME_TYPES[extension],
            filename=report_filename(generated_at, extension),
            memo_count=len(selected),
        )

        self.logger.info(
            f"Report generated: {download.filename} with {download.memo_count} memos",
            extra={"extra_fields": {
                "date_from": self.config.date_from,
                "date_to": self.config.date_to,
                "memo_count": download.memo_count,
            }}
        )
        return download
