"""Upload ingestion, checksum verification and on-disk file management."""

from filestore.checksum_validator import (
    IncrementalChecksumCalculator,
    check_contents,
    compute_checksum,
    verify_checksum,
)
from filestore.file_ingestor import ingest, read_all, verify_contents
from filestore.file_storage import (
    create_file,
    create_return_file,
    delete_files,
    ensure_dir,
    files_by_ext,
    path_exists,
    path_not_exists,
    write_file,
)

__all__ = [
    "IncrementalChecksumCalculator",
    "check_contents",
    "compute_checksum",
    "verify_checksum",
    "ingest",
    "read_all",
    "verify_contents",
    "create_file",
    "create_return_file",
    "delete_files",
    "ensure_dir",
    "files_by_ext",
    "path_exists",
    "path_not_exists",
    "write_file",
]
