import json
import logging
import time

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

REDACTED = "***"
SENSITIVE_FIELDS = {"password", "accessToken"}
MAX_LOGGED_BODY = 2000


def redact(data):
    """Replace sensitive values anywhere in a decoded JSON document."""
    if isinstance(data, dict):
        return {
            key: REDACTED if key in SENSITIVE_FIELDS else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data


def _loggable_body(raw: bytes, content_type: str) -> str:
    if not raw:
        return ""
    if content_type.startswith("application/json"):
        try:
            text = json.dumps(redact(json.loads(raw)))
        except ValueError:
            text = "<invalid json>"
    else:
        text = f"<{len(raw)} bytes {content_type or 'unknown'}>"
    return text[:MAX_LOGGED_BODY]


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs every request and its outcome.

    - Request: method, path, client IP, user agent, body (passwords redacted)
    - Response: status code, body (redacted) and elapsed time
    - Exceptions: logged with traceback, then left for Django to handle
    """

    def process_request(self, request):
        request._started_at = time.monotonic()
        logger.info(
            "%s %s %s %s %s",
            request.method,
            request.get_full_path(),
            request.META.get('REMOTE_ADDR', 'unknown'),
            request.headers.get('User-Agent', 'unknown'),
            _loggable_body(request.body, request.content_type or ""),
        )

    def process_response(self, request, response):
        elapsed_ms = (time.monotonic() - getattr(request, '_started_at', time.monotonic())) * 1000
        body = b"" if response.streaming else response.content
        message = "%s - %s %s => %s %s (%.1fms)"
        args = (
            "Success" if response.status_code < 400 else "Error",
            request.method,
            request.get_full_path(),
            response.status_code,
            _loggable_body(body, response.get('Content-Type', '')),
            elapsed_ms,
        )
        if response.status_code >= 500:
            logger.error(message, *args)
        elif response.status_code >= 400:
            logger.warning(message, *args)
        else:
            logger.info(message, *args)
        return response

    def process_exception(self, request, exception):
        logger.exception("Error - %s %s => %s", request.method, request.get_full_path(), exception)
        return None
