"""Custom exception classes for svcutil."""

from typing import List

from svcutil.types import DeleteFailure


class SvcUtilError(Exception):
    """
    Base exception class for all svcutil errors.
    """
    retryable = False


class EntropyError(SvcUtilError):
    """
    Raised when the operating system's secure random source is unavailable.
    """
    pass


class TransportError(SvcUtilError):
    """
    Raised when reading or writing a stream fails mid-transfer.

    Retrying the same request may succeed.
    """
    retryable = True


class IntegrityError(SvcUtilError):
    """
    Raised when received content does not match what the sender claimed.

    Retrying without a new upload cannot succeed.
    """
    pass


class ChecksumMismatchError(IntegrityError):
    """
    Raised when the SHA-256 checksum of received bytes differs from the claimed one.
    """

    def __init__(self, expected: str, actual: str):
        super().__init__("checksums do not match")
        self.expected = expected
        self.actual = actual


class BatchDeleteError(SvcUtilError):
    """
    Raised when one or more paths of a batch deletion could not be removed.

    Failures are kept most recent first.
    """

    def __init__(self, failures: List[DeleteFailure]):
        self.failures = list(failures)
        super().__init__("; ".join(str(failure) for failure in self.failures))

    @property
    def errors(self) -> List[OSError]:
        """Underlying OS errors, in the same order as failures."""
        return [failure.error for failure in self.failures]
