"""Tests for upload ingestion."""

import io

import pytest

from svcutil.exceptions import ChecksumMismatchError, IntegrityError, TransportError
from filestore.checksum_validator import compute_checksum
from filestore.file_ingestor import ingest, read_all


class FlakyStream:
    """Stream that yields some data then fails like a dropped connection."""

    def __init__(self, data: bytes):
        self._data = data
        self._calls = 0

    def read(self, size=-1):
        self._calls += 1
        if self._calls == 1:
            return self._data
        raise ConnectionResetError("connection reset by peer")


def test_ingest_returns_verified_contents(sample_bytes, sample_checksum):
    assert ingest(io.BytesIO(sample_bytes), sample_checksum) == sample_bytes


def test_ingest_accepts_empty_upload():
    assert ingest(io.BytesIO(b''), compute_checksum(b'')) == b''


def test_ingest_reads_large_stream_in_pieces():
    data = b'x' * (3 * 64 * 1024 + 17)
    assert ingest(io.BytesIO(data), compute_checksum(data)) == data


def test_ingest_mismatch_raises_integrity_error(sample_bytes):
    wrong = compute_checksum(b'something else')

    with pytest.raises(ChecksumMismatchError) as exc_info:
        ingest(io.BytesIO(sample_bytes), wrong)

    exc = exc_info.value
    assert isinstance(exc, IntegrityError)
    assert not exc.retryable
    assert exc.expected == wrong
    assert exc.actual == compute_checksum(sample_bytes)
    assert str(exc) == 'checksums do not match'


def test_ingest_read_failure_raises_transport_error(sample_bytes, sample_checksum):
    with pytest.raises(TransportError) as exc_info:
        ingest(FlakyStream(sample_bytes), sample_checksum)

    assert exc_info.value.retryable
    assert not isinstance(exc_info.value, IntegrityError)
    assert isinstance(exc_info.value.__cause__, ConnectionResetError)


def test_read_all_reads_until_eof(sample_file, sample_bytes):
    with open(sample_file, 'rb') as f:
        assert read_all(f, piece_size=4) == sample_bytes
