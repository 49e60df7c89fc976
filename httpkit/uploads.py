"""FastAPI dependencies for reading uploads and required form values."""

from fastapi import File, Form, Request, UploadFile, status

from svcutil import config
from svcutil.exceptions import TransportError
from svcutil.logging_config import get_logger
from filestore.file_ingestor import verify_contents
from httpkit.responses import MessageError

logger = get_logger(__name__)

_FORM_METHODS = ("POST", "PUT", "PATCH")


async def get_file_contents(
    file: UploadFile = File(..., alias=config.UPLOAD_FIELD_NAME),
    checksum: str = Form(..., alias=config.CHECKSUM_FIELD_NAME),
) -> bytes:
    """
    Read the uploaded file and verify it against the submitted checksum.

    Parameters:
        - file: File to upload (multipart/form-data)
        - checksum: SHA-256 of the file, lowercase hex

    Returns:
        - Verified file contents

    Raises:
        - TransportError: Upload could not be read
        - ChecksumMismatchError: Contents do not match the checksum
    """
    # The multipart body is already parsed and spooled here, so OSError means
    # the spool file failed. A client that disconnects mid-body surfaces as
    # ClientDisconnect, which install_error_handlers maps to the same 400.
    try:
        contents = await file.read()
    except OSError as e:
        logger.warning(f"Failed to read upload {file.filename!r}: {e}")
        raise TransportError(f"failed to read upload: {e}") from e
    finally:
        await file.close()

    return verify_contents(contents, checksum)


async def require_id(request: Request) -> str:
    """
    Read the "id" value from the form body or the query string.

    Raises:
        - MessageError(400): The id is missing or empty
    """
    id_ = ""
    if request.method in _FORM_METHODS:
        form = await request.form()
        value = form.get("id")
        if isinstance(value, str):
            id_ = value

    if not id_:
        id_ = request.query_params.get("id", "")

    if not id_:
        raise MessageError("id is empty", status.HTTP_400_BAD_REQUEST)
    return id_
