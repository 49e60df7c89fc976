"""JSON response envelopes for FastAPI handlers."""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from svcutil.constants import JSON_CONTENT_TYPE
from svcutil.exceptions import SvcUtilError


class MessageResponse(BaseModel):
    """Response body carrying a single human-readable message."""
    message: str


class MessageError(SvcUtilError):
    """
    Raised by handlers to reply with a JSON message and a chosen status code.
    """

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def json_response(obj: Any, code: int = status.HTTP_200_OK) -> JSONResponse:
    """
    Serialize obj as the JSON body of a response.

    Args:
        obj: Any JSON-encodable value (pydantic models included)
        code: HTTP status code

    Returns:
        JSONResponse with utf-8 content type and nosniff header
    """
    return JSONResponse(
        content=jsonable_encoder(obj),
        status_code=code,
        media_type=JSON_CONTENT_TYPE,
        headers={"X-Content-Type-Options": "nosniff"},
    )


def json_message(message: str, code: int) -> JSONResponse:
    """
    Reply with {"message": message}; mostly used for errors.
    """
    return json_response(MessageResponse(message=message), code)


def json_ok() -> JSONResponse:
    return json_message("OK", status.HTTP_200_OK)


def json_not_found() -> JSONResponse:
    return json_message("Not Found", status.HTTP_404_NOT_FOUND)


def json_require_login() -> JSONResponse:
    return json_message("Require Login", status.HTTP_401_UNAUTHORIZED)
