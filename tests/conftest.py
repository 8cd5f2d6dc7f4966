"""
Shared test fixtures and configuration.
"""

import pytest
import os

# Set test environment variables before importing app modules
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("REPORT_ARCHIVE_ENABLED", "false")
os.environ.setdefault("REPORT_ARCHIVE_PATH", "/tmp/memodesk_test_reports")

from memodesk.models import Memo  # noqa: E402
from memodesk.storage import init_memo_store  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    """Fresh global memo store."""
    return init_memo_store()


@pytest.fixture
def make_memo():
    """Factory for memos with sensible defaults."""
    counter = {"n": 0}

    def _make(**fields) -> Memo:
        counter["n"] += 1
        values = {
            "id": f"memo-{counter['n']}",
            "subject": f"Subject {counter['n']}",
            "sender": "Alice",
            "recipient": "Bob",
        }
        values.update(fields)
        return Memo(**values)

    return _make
