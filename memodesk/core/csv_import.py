"""
CSV import - reads an uploaded CSV file and acknowledges it.

Importing rows into the memo store is not supported; the upload is only
decoded and counted so the user gets feedback on the file.
"""

import logging
from typing import List, Optional

from fastapi import UploadFile

from ..models import CsvImportResult, Notification

logger = logging.getLogger(__name__)


class CsvReadError(Exception):
    """Raised when an uploaded CSV file cannot be read."""

    @property
    def notification(self) -> Notification:
        return Notification(
            title="Import Error",
            description="Error reading CSV file. Please check the format.",
            variant="destructive",
        )


async def read_csv_upload(upload: UploadFile, max_bytes: int) -> str:
    """
    Read an uploaded file as UTF-8 text.

    Args:
        upload: Uploaded CSV file
        max_bytes: Largest accepted file size

    Returns:
        str: File content

    Raises:
        CsvReadError: If the file is too large, empty or not UTF-8 text
    """
    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise CsvReadError(f"{upload.filename}: file exceeds {max_bytes} bytes")

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CsvReadError(f"{upload.filename}: not UTF-8 text") from e

    if not text.strip():
        raise CsvReadError(f"{upload.filename}: file is empty")
    return text


def parse_headers(text: str) -> List[str]:
    first_line = text.splitlines()[0]
    return [header.strip().lower() for header in first_line.split(",")]


def count_records(text: str) -> int:
    """Non-blank lines after the header line."""
    return sum(1 for line in text.splitlines()[1:] if line.strip())


def acknowledge_import(text: str, filename: Optional[str] = None) -> CsvImportResult:
    """
    Describe an uploaded CSV file without importing it.

    Args:
        text: Decoded file content
        filename: Name of the uploaded file

    Returns:
        CsvImportResult: Header names, record count and the user notification
    """
    record_count = count_records(text)
    logger.info(
        f"CSV import acknowledged: {filename} ({record_count} records, not imported)",
        extra={"extra_fields": {"filename": filename, "record_count": record_count}}
    )
    return CsvImportResult(
        filename=filename,
        headers=parse_headers(text),
        record_count=record_count,
        notification=Notification(
            title="CSV Import",
            description=(
                f"Ready to import {record_count} records. "
                "Importing into the memo list is not available yet."
            ),
        ),
    )
