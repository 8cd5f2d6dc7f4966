"""
Report Exporter Interface - hands a rendered report to its destination.

Rendering stays free of side effects; everything that touches the outside
world (an HTTP attachment, a file on disk) sits behind this interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..models import ReportDownload


class ReportExporter(ABC):
    """Contract for every report destination."""

    @abstractmethod
    async def export(self, download: ReportDownload) -> Any:
        """
        Deliver a rendered report.

        Args:
            download: Document text, MIME type and file name

        Returns:
            Destination specific result (a response, a stored path, ...)
        """
        pass
