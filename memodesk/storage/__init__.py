"""Storage module - the in-memory memo store."""

from .memo_store import MemoStore, init_memo_store, get_memo_store

__all__ = ['MemoStore', 'init_memo_store', 'get_memo_store']
