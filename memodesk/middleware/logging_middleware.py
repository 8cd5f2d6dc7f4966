"""
ASGI middleware that logs every API request and its response.

Written as a pure ASGI middleware (not BaseHTTPMiddleware) so that file
attachments and streamed bodies pass through untouched.

Logged per request: method, path, query params, client, status code,
processing time. Long memo text in JSON bodies is shortened and credential
headers are masked. Report attachments, CSV uploads and the HTML page are
counted as they stream and logged by size only.
"""

import json
import logging
import time
from typing import List, Optional
from starlette.types import ASGIApp, Receive, Scope, Send

from ..core.logging_config import mask_credential_headers, shorten_memo_text, truncate_large_data

logger = logging.getLogger(__name__)

# Bodies of these content types are summarized instead of logged verbatim
_SUMMARIZED_CONTENT_TYPES = ("text/html", "text/csv", "multipart/form-data")


def _is_summarized(content_type: str) -> bool:
    return content_type.startswith(_SUMMARIZED_CONTENT_TYPES)


def _sanitize_body(data: bytes, content_type: str) -> Optional[str]:
    """Render a JSON or text body for the log line."""
    if not data:
        return None

    text = data.decode("utf-8", errors="ignore")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return truncate_large_data(text, max_length=5000)
    return truncate_large_data(json.dumps(shorten_memo_text(payload), ensure_ascii=False), max_length=5000)


class _BodyRecorder:
    """
    Collects a request or response body for the log line.

    Summarized content types (report attachments, the HTML page, CSV
    uploads) are only counted, never buffered.
    """

    def __init__(self, content_type: str = ""):
        self.content_type = content_type
        self.size = 0
        self.chunks: List[bytes] = []

    def add(self, chunk: bytes) -> None:
        self.size += len(chunk)
        if not _is_summarized(self.content_type):
            self.chunks.append(chunk)

    def render(self) -> Optional[str]:
        if not self.size:
            return None
        if _is_summarized(self.content_type):
            return f"<{self.content_type.split(';')[0]} {self.size} bytes>"
        return _sanitize_body(b"".join(self.chunks), self.content_type)


def _extract_error_reason(response_text: Optional[str]) -> Optional[str]:
    """Pull a short error reason out of an error response body."""
    if not response_text:
        return None
    try:
        payload = json.loads(response_text)
    except json.JSONDecodeError:
        return truncate_large_data(response_text, max_length=500)

    if isinstance(payload, dict):
        detail = payload.get("detail")
        # Notification-shaped details carry the user-facing text in "description"
        if isinstance(detail, dict):
            return str(detail.get("description") or detail)
        for key in ("detail", "message", "error"):
            if payload.get(key):
                return str(payload[key])
    return truncate_large_data(json.dumps(payload, ensure_ascii=False), max_length=500)


def _headers_to_dict(raw_headers) -> dict:
    return {
        k.decode("utf-8", errors="ignore"): v.decode("utf-8", errors="ignore")
        for k, v in raw_headers
    }


class RequestLoggingMiddleware:
    """Pure ASGI middleware to log all API requests and responses."""

    def __init__(self, app: ASGIApp, exclude_paths: Optional[list] = None):
        """
        Args:
            app: The ASGI application
            exclude_paths: Paths that are passed through without logging (e.g. ["/health"])
        """
        self.app = app
        self.exclude_paths = exclude_paths or ["/health", "/"]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        if path in self.exclude_paths:
            await self.app(scope, receive, send)
            return

        start_time = time.time()
        request_id = id(scope)
        method = scope.get("method", "UNKNOWN")
        query_string = scope.get("query_string", b"").decode("utf-8", errors="ignore")
        query_params = dict(
            item.split("=", 1) for item in query_string.split("&") if "=" in item
        ) if query_string else None

        request_headers = _headers_to_dict(scope.get("headers", []))
        client = scope.get("client")

        request_body = _BodyRecorder(request_headers.get("content-type", ""))
        body_complete = False

        async def logging_receive():
            nonlocal body_complete
            message = await receive()
            if message["type"] == "http.request" and not body_complete:
                request_body.add(message.get("body", b""))
                if not message.get("more_body", False):
                    body_complete = True
            return message

        status_code = 0
        response_body = _BodyRecorder()
        response_headers = {}

        async def logging_send(message):
            nonlocal status_code, response_headers
            if message["type"] == "http.response.start":
                status_code = message.get("status", 0)
                response_headers = _headers_to_dict(message.get("headers", []))
                response_body.content_type = response_headers.get("content-type", "")
            elif message["type"] == "http.response.body":
                response_body.add(message.get("body", b""))
            await send(message)

        logger.info(
            f"Request started: {method} {path}",
            extra={"extra_fields": {
                "request_id": request_id,
                "method": method,
                "path": path,
                "query_params": query_params,
                "client": client[0] if client else None,
                "user_agent": request_headers.get("user-agent"),
            }}
        )

        try:
            await self.app(scope, logging_receive, logging_send)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {method} {path} - {str(e)}",
                exc_info=True,
                extra={"extra_fields": {
                    "request_id": request_id,
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "error": str(e),
                }}
            )
            raise

        duration_ms = (time.time() - start_time) * 1000

        request_body_text = request_body.render()
        response_body_text = response_body.render()
        error_reason = _extract_error_reason(response_body_text) if status_code >= 400 else None

        if status_code < 400:
            log_level = logging.INFO
        elif status_code < 500:
            log_level = logging.WARNING
        else:
            log_level = logging.ERROR

        completion_message = (
            f"Request completed: {method} {path} - {status_code} ({duration_ms:.2f}ms)"
            f" | request_body={request_body_text or '-'}"
            f" | response_body={response_body_text or '-'}"
        )
        if error_reason:
            completion_message += f" | error_reason={error_reason}"

        logger.log(
            log_level,
            completion_message,
            extra={"extra_fields": {
                "request_id": request_id,
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
                "request_body": request_body_text,
                "response_body": response_body_text,
                "response_headers": mask_credential_headers(response_headers),
                "error_reason": error_reason,
            }}
        )
