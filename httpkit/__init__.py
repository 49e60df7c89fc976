"""FastAPI glue: JSON envelopes, upload dependencies, error handlers, HTTP client."""

from httpkit.error_handlers import create_app, install_error_handlers, install_request_logging
from httpkit.http_client import HttpClient
from httpkit.responses import (
    MessageError,
    MessageResponse,
    json_message,
    json_not_found,
    json_ok,
    json_require_login,
    json_response,
)
from httpkit.uploads import get_file_contents, require_id

__all__ = [
    "create_app",
    "install_error_handlers",
    "install_request_logging",
    "HttpClient",
    "MessageError",
    "MessageResponse",
    "json_message",
    "json_not_found",
    "json_ok",
    "json_require_login",
    "json_response",
    "get_file_contents",
    "require_id",
]
