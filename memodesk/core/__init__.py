"""Core module - memo form, memo list and CSV import acknowledgement."""

from .memo_form import MemoForm, MemoValidationError
from .memo_list import MemoSelector, build_memo_list
from .csv_import import CsvReadError, acknowledge_import, read_csv_upload

__all__ = [
    'MemoForm', 'MemoValidationError',
    'MemoSelector', 'build_memo_list',
    'CsvReadError', 'acknowledge_import', 'read_csv_upload',
]
