"""Provides SHA-256 checksum calculation and verification helpers."""

import hashlib

from svcutil.types import IntegrityCheckResult


def compute_checksum(data: bytes) -> str:
    """
    Compute SHA-256 checksum for given data.

    Args:
        data: Bytes to compute checksum for

    Returns:
        Lowercase hexadecimal string representation of SHA-256 hash
    """
    return hashlib.sha256(data).hexdigest()


def verify_checksum(data: bytes, expected: str) -> bool:
    """
    Verify that data matches expected checksum.

    The comparison is case-sensitive; callers normalize case if needed.

    Args:
        data: Bytes to verify
        expected: Expected SHA-256 checksum (lowercase hex string)

    Returns:
        True if checksum matches, False otherwise
    """
    return check_contents(data, expected).matches


def check_contents(data: bytes, expected: str) -> IntegrityCheckResult:
    """
    Compute the checksum of data and pair it with the claimed one.
    """
    return IntegrityCheckResult(data=data, expected=expected, actual=compute_checksum(data))


class IncrementalChecksumCalculator:
    """
    Calculate SHA-256 checksum incrementally for streaming data.

    Usage:
        calculator = IncrementalChecksumCalculator()
        calculator.update(piece1)
        calculator.update(piece2)
        final_checksum = calculator.finalize()
    """

    def __init__(self):
        self._hasher = hashlib.sha256()
        self._size = 0
        self._finalized = False

    def update(self, data: bytes) -> None:
        """
        Update checksum with new data.

        Args:
            data: Bytes to add to checksum calculation
        """
        if self._finalized:
            raise ValueError("Cannot update after finalization")
        self._hasher.update(data)
        self._size += len(data)

    def finalize(self) -> str:
        """
        Finalize checksum calculation and return result.

        Returns:
            Lowercase hexadecimal string representation of SHA-256 hash
        """
        self._finalized = True
        return self._hasher.hexdigest()

    @property
    def size(self) -> int:
        """Total number of bytes hashed so far."""
        return self._size

    def reset(self) -> None:
        """Reset calculator to initial state."""
        self._hasher = hashlib.sha256()
        self._size = 0
        self._finalized = False
