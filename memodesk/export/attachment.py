"""
Attachment exporter - serves a report as a browser file download.
"""

from fastapi import Response

from ..models import ReportDownload
from .interface import ReportExporter


class AttachmentExporter(ReportExporter):
    """Turns a report into an HTTP response the browser saves to disk."""

    async def export(self, download: ReportDownload) -> Response:
        return Response(
            content=download.content.encode("utf-8"),
            media_type=f"{download.mime_type}; charset=utf-8",
            headers={
                "Content-Disposition": f'attachment; filename="{download.filename}"',
                "X-Report-Memo-Count": str(download.memo_count),
                "Access-Control-Expose-Headers": "Content-Disposition, X-Report-Memo-Count",
            },
        )
