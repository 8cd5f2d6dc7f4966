"""
Memo Store - Session-scoped, in-memory collection of created memos.

The store is append-only and ordered newest first. Nothing is persisted:
the store is created when the application starts and discarded with it.
"""

import logging
from typing import Iterator, Optional, Tuple

from ..models import Memo

logger = logging.getLogger(__name__)


class MemoStore:
    """
    Ordered, append-only memo collection.

    ``add`` is the only mutation. Readers receive ``snapshot()`` tuples so a
    report or list view never observes a later insertion.
    """

    def __init__(self):
        self._memos: list[Memo] = []

    def add(self, memo: Memo) -> Memo:
        """
        Prepend a memo so the newest memo comes first.

        Args:
            memo: Validated memo with an assigned id

        Returns:
            Memo: The stored memo
        """
        self._memos.insert(0, memo)
        logger.debug(f"Memo stored: {memo.id} (total={len(self._memos)})")
        return memo

    def snapshot(self) -> Tuple[Memo, ...]:
        """Current memos, newest first."""
        return tuple(self._memos)

    def get(self, memo_id: str) -> Optional[Memo]:
        """Look up a memo by id."""
        for memo in self._memos:
            if memo.id == memo_id:
                return memo
        return None

    def __len__(self) -> int:
        return len(self._memos)

    def __iter__(self) -> Iterator[Memo]:
        return iter(self.snapshot())


# Global memo store instance
_memo_store: Optional[MemoStore] = None


def init_memo_store() -> MemoStore:
    """
    Create a fresh global memo store, dropping any previous one.

    Returns:
        MemoStore: The new store
    """
    global _memo_store
    _memo_store = MemoStore()
    return _memo_store


def get_memo_store() -> MemoStore:
    """
    Get the global memo store (FastAPI dependency).

    Raises:
        RuntimeError: If the store has not been initialized
    """
    if _memo_store is None:
        raise RuntimeError("Memo store not initialized. Call init_memo_store() first.")
    return _memo_store
