"""Browser UI module."""

from .page import INDEX_HTML

__all__ = ['INDEX_HTML']
