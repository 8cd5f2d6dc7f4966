"""
Logging setup for the Memo Desk service.

Two destinations, both optional and driven by ``Settings``:
- console: one colored, human-readable line per record
- file: rotating log, one JSON object per record when ``log_json_format`` is set

Structured context travels on records as ``extra={"extra_fields": {...}}``
and is merged into the JSON object (memo ids, report format, request data).
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PLAIN_FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Libraries that log every request or multipart part at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "multipart", "python_multipart", "uvicorn.access")

# Browser credentials that can show up in request/response headers
CREDENTIAL_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})

# Memo text longer than this is cut down in request/response logs
LOGGED_TEXT_PREVIEW = 200


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',     # Cyan
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Records are shared between handlers; the file handler must see the plain level
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        colored.levelname = f"{color}{record.levelname:8s}{self.RESET}"
        return super().format(colored)


class JSONFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_data.update(extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(config: Any, level: int) -> logging.Handler:
    log_path = Path(config.log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=log_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding='utf-8'
    )
    handler.setLevel(level)
    if config.log_json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(config: Any) -> None:
    """
    Replace the root logger's handlers with the ones enabled in ``config``.

    Args:
        config: Settings object with logging configuration
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    if config.log_console_enabled:
        root_logger.addHandler(_console_handler(log_level))
    if config.log_file_enabled:
        root_logger.addHandler(_file_handler(config, log_level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info(
        f"Logging initialized: level={config.log_level.upper()}, "
        f"console={config.log_console_enabled}, "
        f"file={config.log_file_enabled}"
    )


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that merges fixed context into ``extra_fields``.

    Usage:
        logger = LoggerAdapter(logging.getLogger(__name__), {"report_format": "csv"})
        logger.info("Report rendered")  # JSON log carries report_format
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = kwargs.setdefault('extra', {})
        extra['extra_fields'] = {**self.extra, **extra.get('extra_fields', {})}
        return msg, kwargs


def mask_credential_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy of ``headers`` with cookies and authorization values hidden."""
    return {
        name: "***FILTERED***" if name.lower() in CREDENTIAL_HEADERS else value
        for name, value in headers.items()
    }


def shorten_memo_text(data: Any, max_length: int = LOGGED_TEXT_PREVIEW) -> Any:
    """
    Cut long strings in a JSON payload (memo content, CSV text) to a preview.

    Subjects, names and dates stay readable; only values above
    ``max_length`` characters are shortened.
    """
    if isinstance(data, dict):
        return {key: shorten_memo_text(value, max_length) for key, value in data.items()}
    if isinstance(data, list):
        return [shorten_memo_text(item, max_length) for item in data]
    if isinstance(data, str):
        return truncate_large_data(data, max_length)
    return data


def truncate_large_data(data: str, max_length: int = 5000) -> str:
    """Cut ``data`` down to ``max_length`` characters, noting the full length."""
    if len(data) <= max_length:
        return data
    return data[:max_length] + f"... (truncated, total length: {len(data)})"
