"""
Local archive exporter - keeps a copy of generated reports on the server.

Each report is first written to a staging file next to its destination and
then moved into place. The staging file is removed whether or not the write
succeeds.
"""

import logging
import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional

import aiofiles

from ..models import ReportDownload
from .interface import ReportExporter

logger = logging.getLogger(__name__)


class LocalArchiveExporter(ReportExporter):
    """
    Local filesystem report archive.
    Stores reports as ``<base_dir>/<filename>``.
    """

    def __init__(self, base_dir: str = "./data/reports"):
        """
        Args:
            base_dir: Directory receiving archived reports
        """
        self.base_dir = Path(base_dir).resolve()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, filename: str) -> Path:
        """Resolve a report file name inside the archive directory."""
        full_path = (self.base_dir / filename).resolve()

        if full_path.parent != self.base_dir:
            raise ValueError(f"Invalid report name: {filename} - path traversal detected")

        return full_path

    @asynccontextmanager
    async def _staged_file(self, target: Path) -> AsyncIterator[Path]:
        """Yield a staging path beside ``target`` and always remove it afterwards."""
        staging = target.with_name(f".{target.name}.{uuid.uuid4().hex}.part")
        try:
            yield staging
        finally:
            if staging.exists():
                staging.unlink()

    async def export(self, download: ReportDownload) -> Optional[Path]:
        """
        Write a report into the archive, replacing a same-day report of the same format.

        Returns:
            Optional[Path]: Archived file path, or None if the write failed
        """
        target = self._get_full_path(download.filename)
        try:
            async with self._staged_file(target) as staging:
                async with aiofiles.open(staging, "w", encoding="utf-8") as f:
                    await f.write(download.content)
                os.replace(staging, target)
        except OSError as e:
            logger.error(f"Error archiving report {download.filename}: {e}")
            return None

        logger.info(f"Report archived: {target}")
        return target

    async def list_reports(self, pattern: str = "memo-report-*") -> List[str]:
        """Archived report file names, sorted."""
        return sorted(path.name for path in self.base_dir.glob(pattern) if path.is_file())

    async def load(self, filename: str) -> Optional[str]:
        """Text of an archived report, or None if it is not in the archive."""
        full_path = self._get_full_path(filename)
        if not full_path.exists():
            return None
        async with aiofiles.open(full_path, "r", encoding="utf-8") as f:
            return await f.read()
