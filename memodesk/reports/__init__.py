"""Reports module - filtering, rendering and naming of memo reports."""

from .filters import filter_memos, in_date_range, apply_report_filters
from .html_renderer import render_html_report
from .csv_renderer import render_csv_report, CSV_HEADERS
from .generator import FORMAT_MIME_TYPES, ReportGenerator, report_filename

__all__ = [
    'filter_memos', 'in_date_range', 'apply_report_filters',
    'render_html_report', 'render_csv_report', 'CSV_HEADERS',
    'FORMAT_MIME_TYPES', 'ReportGenerator', 'report_filename',
]
