"""
Unit tests for logging configuration and the request logging middleware.
"""

import json
import logging
from types import SimpleNamespace

import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from memodesk.core.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    LoggerAdapter,
    mask_credential_headers,
    setup_logging,
    shorten_memo_text,
    truncate_large_data,
)
from memodesk.middleware import RequestLoggingMiddleware
from memodesk.middleware.logging_middleware import _BodyRecorder, _extract_error_reason, _sanitize_body


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("memodesk.test", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def _logging_config(tmp_path, **overrides) -> SimpleNamespace:
    options = dict(
        log_level="debug",
        log_console_enabled=False,
        log_file_enabled=True,
        log_file_path=str(tmp_path / "logs" / "memodesk.log"),
        log_json_format=True,
    )
    options.update(overrides)
    return SimpleNamespace(**options)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved = list(root.handlers)
    yield root
    for handler in root.handlers:
        handler.flush()
        handler.close()
    root.handlers[:] = saved


class TestFormatters:
    """Tests for ColoredFormatter and JSONFormatter."""

    def test_json_formatter(self):
        output = json.loads(JSONFormatter().format(_record(extra_fields={"memo_id": "abc"})))
        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["logger"] == "memodesk.test"
        assert output["memo_id"] == "abc"

    def test_json_formatter_non_serializable_extra(self, tmp_path):
        output = json.loads(JSONFormatter().format(_record(extra_fields={"path": tmp_path})))
        assert output["path"] == str(tmp_path)

    def test_colored_formatter(self):
        output = ColoredFormatter("%(levelname)s %(message)s").format(_record())
        assert "\033[32m" in output
        assert output.endswith("hello")

    def test_colored_formatter_keeps_record_level(self):
        record = _record()
        ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert record.levelname == "INFO"


class TestLoggerAdapter:
    """Tests for LoggerAdapter."""

    def test_merges_context(self):
        adapter = LoggerAdapter(logging.getLogger("memodesk.test"), {"report_format": "csv"})
        _, kwargs = adapter.process("msg", {"extra": {"extra_fields": {"memo_count": 2}}})
        assert kwargs["extra"]["extra_fields"] == {"report_format": "csv", "memo_count": 2}

    def test_without_extra(self):
        adapter = LoggerAdapter(logging.getLogger("memodesk.test"), {"report_format": "html"})
        _, kwargs = adapter.process("msg", {})
        assert kwargs["extra"]["extra_fields"] == {"report_format": "html"}


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path, root_logger):
        config = _logging_config(tmp_path)
        setup_logging(config)

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        logging.getLogger("memodesk.test").info("written")
        for handler in root_logger.handlers:
            handler.flush()

        lines = (tmp_path / "logs" / "memodesk.log").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "written"

    def test_console_and_json_file_together(self, tmp_path, root_logger):
        setup_logging(_logging_config(tmp_path, log_console_enabled=True))
        assert len(root_logger.handlers) == 2

        logging.getLogger("memodesk.reports").info("Report generated")
        for handler in root_logger.handlers:
            handler.flush()

        lines = (tmp_path / "logs" / "memodesk.log").read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "Report generated"
        assert entry["level"] == "INFO"

    def test_repeated_setup_replaces_handlers(self, tmp_path, root_logger):
        config = _logging_config(tmp_path, log_console_enabled=True)
        setup_logging(config)
        setup_logging(config)
        assert len(root_logger.handlers) == 2

    def test_plain_file_format(self, tmp_path, root_logger):
        setup_logging(_logging_config(tmp_path, log_json_format=False))
        logging.getLogger("memodesk.test").warning("plain line")
        for handler in root_logger.handlers:
            handler.flush()

        last = (tmp_path / "logs" / "memodesk.log").read_text(encoding="utf-8").splitlines()[-1]
        assert "| WARNING | memodesk.test:" in last
        assert last.endswith("plain line")


class TestLogHelpers:
    """Tests for header masking and text shortening."""

    def test_mask_credential_headers(self):
        masked = mask_credential_headers({
            "content-type": "text/csv",
            "Set-Cookie": "session=abc",
            "authorization": "Bearer x",
        })
        assert masked["content-type"] == "text/csv"
        assert masked["Set-Cookie"] == "***FILTERED***"
        assert masked["authorization"] == "***FILTERED***"

    def test_shorten_memo_text(self):
        data = {"subject": "Budget", "content": "x" * 300, "tags": ["y" * 300, 7]}
        shortened = shorten_memo_text(data, max_length=50)
        assert shortened["subject"] == "Budget"
        assert shortened["content"].startswith("x" * 50)
        assert "total length: 300" in shortened["content"]
        assert "total length: 300" in shortened["tags"][0]
        assert shortened["tags"][1] == 7

    def test_truncate_large_data(self):
        assert truncate_large_data("short", max_length=10) == "short"
        truncated = truncate_large_data("x" * 20, max_length=10)
        assert truncated.startswith("x" * 10)
        assert "total length: 20" in truncated


class TestMiddlewareHelpers:
    """Tests for request/response body rendering in the middleware."""

    def test_json_body(self):
        body = json.dumps({"subject": "S", "content": "c" * 500}).encode()
        text = _sanitize_body(body, "application/json")
        assert '"subject": "S"' in text
        assert "total length: 500" in text

    def test_plain_text_body(self):
        assert _sanitize_body(b"not json", "text/plain") == "not json"

    def test_empty_body(self):
        assert _sanitize_body(b"", "application/json") is None

    def test_report_body_is_counted(self):
        recorder = _BodyRecorder("text/csv; charset=utf-8")
        recorder.add(b"a,b,c")
        recorder.add(b"\nd,e,f")

        assert recorder.chunks == []
        assert recorder.render() == "<text/csv 11 bytes>"

    def test_json_body_is_kept(self):
        recorder = _BodyRecorder("application/json")
        recorder.add(b'{"subject": ')
        recorder.add(b'"S"}')
        assert recorder.render() == '{"subject": "S"}'

    def test_empty_recorder(self):
        assert _BodyRecorder("text/html").render() is None

    def test_error_reason_from_notification(self):
        body = json.dumps({"detail": {"title": "Validation Error", "description": "Please fill in"}})
        assert _extract_error_reason(body) == "Please fill in"

    def test_error_reason_plain_detail(self):
        assert _extract_error_reason(json.dumps({"detail": "Memo x not found"})) == "Memo x not found"


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware on a small app."""

    @pytest.fixture
    def client(self):
        app = FastAPI()
        app.add_middleware(RequestLoggingMiddleware)

        @app.get("/report")
        async def report():
            return Response(content="a,b,c\n" * 1000, media_type="text/csv")

        @app.post("/echo")
        async def echo(payload: dict):
            return payload

        with TestClient(app) as test_client:
            yield test_client

    def _completed(self, caplog) -> str:
        messages = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Request completed")]
        assert len(messages) == 1
        return messages[0]

    def test_csv_download_logged_by_size(self, client, caplog):
        caplog.set_level(logging.INFO, logger="memodesk.middleware")

        response = client.get("/report")

        assert response.status_code == 200
        assert len(response.content) == 6000
        assert "response_body=<text/csv 6000 bytes>" in self._completed(caplog)

    def test_json_exchange_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="memodesk.middleware")

        response = client.post("/echo", json={"subject": "Budget"})

        assert response.json() == {"subject": "Budget"}
        message = self._completed(caplog)
        assert 'request_body={"subject": "Budget"}' in message
        assert 'response_body={"subject": "Budget"}' in message
