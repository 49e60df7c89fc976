"""Small encoding helpers: base64, ISO 8601 timestamps, MIME types."""

import base64
import binascii
import mimetypes
import os
from datetime import datetime


def base64_encode(data: bytes) -> str:
    """
    Encode bytes as standard, padded base64 text.
    """
    return base64.b64encode(data).decode("ascii")


def base64_decode(text: str) -> bytes:
    """
    Decode standard, padded base64 text.

    Raises:
        ValueError: If the text is not valid base64
    """
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64 input: {e}") from e


def time_now() -> str:
    """
    Get current local time in ISO 8601 with milliseconds and UTC offset.

    Returns:
        Timestamp string (e.g., "2026-10-19T16:47:03.512+08:00")
    """
    return datetime.now().astimezone().isoformat(timespec="milliseconds")


def type_by_filename(filename: str) -> str:
    """
    Guess the MIME type from a filename's extension.

    Returns:
        MIME type, or an empty string if the extension is unknown
    """
    _, ext = os.path.splitext(filename)
    if not ext:
        return ""
    mime_type, _ = mimetypes.guess_type("file" + ext.lower())
    return mime_type or ""
