"""API module."""

from .memos import router as memos_router
from .reports import router as reports_router

__all__ = ['memos_router', 'reports_router']
