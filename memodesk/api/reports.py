"""
Report API endpoints - Generate and download memo reports.
"""

import logging
from pathlib import PurePath
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..config import settings
from ..export import AttachmentExporter, LocalArchiveExporter
from ..models import Notification, ReportConfig, ReportDownload, ReportSummary
from ..reports import FORMAT_MIME_TYPES, ReportGenerator
from ..storage import MemoStore, get_memo_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


def get_report_archive() -> Optional[LocalArchiveExporter]:
    """Configured report archive, or None when archiving is disabled."""
    if not settings.report_archive_enabled:
        return None
    return LocalArchiveExporter(settings.report_archive_path)


def _generator(config: ReportConfig) -> ReportGenerator:
    return ReportGenerator(config, title=settings.report_title, footer=settings.report_footer)


@router.post("")
async def generate_report(
    config: ReportConfig,
    store: MemoStore = Depends(get_memo_store),
    archive: Optional[LocalArchiveExporter] = Depends(get_report_archive)
) -> Response:
    """
    Generate a report and return it as a file download.

    Args:
        config: Date bounds, category filter and format (html or csv)
        store: Session memo store
        archive: Optional server-side report archive

    Returns:
        Response: ``memo-report-<date>.<ext>`` attachment
    """
    download = _generator(config).generate(store.snapshot())

    if archive is not None:
        await archive.export(download)

    return await AttachmentExporter().export(download)


@router.post("/preview")
async def preview_report(
    config: ReportConfig,
    store: MemoStore = Depends(get_memo_store)
):
    """
    Summary statistics of the report the configuration would produce.

    Returns:
        Summary and the notification shown after generation
    """
    summary: ReportSummary = _generator(config).summarize(store.snapshot())
    return {
        "summary": summary.model_dump(by_alias=True, mode="json"),
        "notification": Notification(
            title="Report Generated",
            description=f"Successfully generated report with {summary.total_memos} memos.",
        ).model_dump(),
    }


def _require_archive(archive: Optional[LocalArchiveExporter]) -> LocalArchiveExporter:
    if archive is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report archive is disabled"
        )
    return archive


@router.get("/archive", response_model=List[str])
async def list_archived_reports(
    archive: Optional[LocalArchiveExporter] = Depends(get_report_archive)
):
    """File names of the reports kept in the server-side archive."""
    return await _require_archive(archive).list_reports()


@router.get("/archive/{filename}")
async def download_archived_report(
    filename: str,
    archive: Optional[LocalArchiveExporter] = Depends(get_report_archive)
) -> Response:
    """
    Download a previously archived report again.

    Args:
        filename: Report file name as returned by ``GET /reports/archive``
        archive: Server-side report archive

    Returns:
        Response: The archived report as an attachment
    """
    archive = _require_archive(archive)
    try:
        content = await archive.load(filename)
    except ValueError as e:
        logger.warning(f"Rejected archive request: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid report name: {filename}"
        )

    mime_type = FORMAT_MIME_TYPES.get(PurePath(filename).suffix.lstrip("."))
    if content is None or mime_type is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Report {filename} not found"
        )

    return await AttachmentExporter().export(
        ReportDownload(content=content, mime_type=mime_type, filename=filename)
    )
