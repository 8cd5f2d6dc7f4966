"""Export module - destinations for rendered reports."""

from .interface import ReportExporter
from .attachment import AttachmentExporter
from .local_archive import LocalArchiveExporter

__all__ = ['ReportExporter', 'AttachmentExporter', 'LocalArchiveExporter']
