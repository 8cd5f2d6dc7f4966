"""Models module."""

from .memo import (
    Memo, MemoBase, MemoCreate, MemoCreated, MemoSummary, MemoListView,
    EmptyState, Notification, CsvImportResult,
)
from .report import ReportConfig, ReportSummary, ReportDownload

__all__ = [
    'Memo', 'MemoBase', 'MemoCreate', 'MemoCreated', 'MemoSummary', 'MemoListView',
    'EmptyState', 'Notification', 'CsvImportResult',
    'ReportConfig', 'ReportSummary', 'ReportDownload',
]
