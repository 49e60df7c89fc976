"""Shared data type definitions (IntegrityCheckResult, PersistedFile, DeleteFailure)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IntegrityCheckResult:
    """
    Outcome of comparing received bytes against a claimed checksum.
    """
    data: bytes
    expected: str
    actual: str

    @property
    def matches(self) -> bool:
        return self.actual == self.expected


@dataclass(frozen=True)
class PersistedFile:
    """
    A file written to disk by the persister.
    """
    path: Path
    size: int
    mode: int


@dataclass(frozen=True)
class DeleteFailure:
    """
    A single path that could not be removed during a batch deletion.
    """
    path: str
    error: OSError

    def __str__(self) -> str:
        return f"remove {self.path}: {self.error.strerror or self.error}"
