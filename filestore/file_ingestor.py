"""Reads uploaded streams fully into memory and verifies them against a claimed checksum."""

from typing import BinaryIO

from svcutil.constants import READ_PIECE_SIZE
from svcutil.exceptions import ChecksumMismatchError, TransportError
from svcutil.logging_config import get_logger
from filestore.checksum_validator import check_contents

logger = get_logger(__name__)


def read_all(stream: BinaryIO, piece_size: int = READ_PIECE_SIZE) -> bytes:
    """
    Read a binary stream until EOF.

    Args:
        stream: Readable binary stream (upload body, socket file, etc.)
        piece_size: Size of each read in bytes (default 64KB)

    Returns:
        Entire stream contents

    Raises:
        TransportError: If reading the stream fails; no partial data is returned
    """
    buffer = bytearray()
    try:
        while True:
            piece = stream.read(piece_size)
            if not piece:
                break
            buffer.extend(piece)
    except OSError as e:
        logger.warning(f"Stream read failed after {len(buffer)} bytes: {e}")
        raise TransportError(f"failed to read stream: {e}") from e
    return bytes(buffer)


def verify_contents(contents: bytes, claimed_checksum: str) -> bytes:
    """
    Return contents if their SHA-256 checksum equals the claimed one.

    Raises:
        ChecksumMismatchError: If the checksums differ
    """
    result = check_contents(contents, claimed_checksum)
    if not result.matches:
        logger.warning(
            f"Checksum mismatch: expected={result.expected!r} actual={result.actual} size={len(contents)}"
        )
        raise ChecksumMismatchError(expected=result.expected, actual=result.actual)
    return result.data


def ingest(stream: BinaryIO, claimed_checksum: str) -> bytes:
    """
    Read an uploaded stream into memory and verify its integrity.

    Nothing is written to disk; pass the result to the persister if needed.

    Args:
        stream: Readable binary stream holding the upload
        claimed_checksum: SHA-256 hex digest supplied by the client

    Returns:
        Verified file contents

    Raises:
        TransportError: If the stream could not be read
        ChecksumMismatchError: If the contents do not match the claimed checksum
    """
    contents = read_all(stream)
    verified = verify_contents(contents, claimed_checksum)
    logger.debug(f"Ingested {len(verified)} bytes")
    return verified
