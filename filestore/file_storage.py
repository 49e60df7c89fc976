"""Manages files on disk: create/overwrite with fixed permissions, batch delete, path checks."""

import glob
import io
import os
import stat
from pathlib import Path
from typing import BinaryIO, List, Tuple, Union

from svcutil.constants import DIR_MODE, FILE_MODE, READ_PIECE_SIZE
from svcutil.exceptions import BatchDeleteError
from svcutil.logging_config import get_logger
from svcutil.types import DeleteFailure, PersistedFile

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def path_not_exists(path: PathLike) -> bool:
    """
    Check that nothing (not even a dangling symlink) exists at path.

    Raises:
        OSError: If the path cannot be inspected for reasons other than absence
    """
    try:
        os.lstat(path)
    except FileNotFoundError:
        return True
    return False


def path_exists(path: PathLike) -> bool:
    return not path_not_exists(path)


def ensure_dir(path: PathLike) -> Path:
    """
    Ensure a directory exists at path, creating it (owner-only) if absent.

    Returns:
        Path object for the directory
    """
    dirpath = Path(path)
    if path_not_exists(dirpath):
        dirpath.mkdir(mode=DIR_MODE)
        logger.info(f"Created directory {dirpath}")
    return dirpath


def files_by_ext(directory: PathLike, ext: str) -> List[str]:
    """
    List files in directory whose names end with ext (e.g., ".json").
    """
    pattern = os.path.join(glob.escape(os.fspath(directory)), "*" + ext)
    return sorted(glob.glob(pattern))


def _copy(src: BinaryIO, dst: BinaryIO, piece_size: int = READ_PIECE_SIZE) -> int:
    written = 0
    while True:
        piece = src.read(piece_size)
        if not piece:
            break
        dst.write(piece)
        written += len(piece)
    return written


def create_return_file(path: PathLike, src: BinaryIO) -> Tuple[int, BinaryIO]:
    """
    Write src to path, creating or overwriting it with mode 0600.

    The returned file is open for reading and writing, positioned at its end.
    The caller owns it and must close it.

    Args:
        path: Target file path
        src: Readable binary stream to copy from

    Returns:
        Tuple of (bytes_written, open_file)

    Raises:
        OSError: If the file cannot be created or the copy fails
    """
    fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    f = os.fdopen(fd, "w+b")
    try:
        size = _copy(src, f)
        f.flush()
    except BaseException:
        f.close()
        raise
    return size, f


def create_file(path: PathLike, src: BinaryIO) -> int:
    """
    Write src to path, creating or overwriting it with mode 0600.

    Args:
        path: Target file path
        src: Readable binary stream to copy from

    Returns:
        Number of bytes written

    Raises:
        OSError: If the file cannot be created or the copy fails
    """
    size, f = create_return_file(path, src)
    with f:
        logger.debug(f"Wrote {size} bytes to {path}")
    return size


def write_file(path: PathLike, data: bytes) -> PersistedFile:
    """
    Persist bytes to path, creating or overwriting it with mode 0600.

    Returns:
        PersistedFile describing what was written
    """
    size = create_file(path, io.BytesIO(data))
    filepath = Path(path)
    mode = stat.S_IMODE(filepath.stat().st_mode)
    logger.info(f"Persisted {size} bytes to {filepath}")
    return PersistedFile(path=filepath, size=size, mode=mode)


def _remove_path(path: PathLike) -> None:
    # Same semantics as POSIX remove(): files and symlinks are unlinked,
    # empty directories are removed.
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def delete_files(*paths: PathLike) -> None:
    """
    Delete every path, ignoring the ones that do not exist.

    Every path is attempted even after a failure.

    Args:
        *paths: Files (or empty directories) to remove

    Raises:
        BatchDeleteError: If any path could not be removed for a reason other
            than not existing; failures are listed most recent first
    """
    failures: List[DeleteFailure] = []
    removed = 0

    for path in paths:
        try:
            _remove_path(path)
            removed += 1
        except FileNotFoundError:
            logger.debug(f"Skipping missing path {path}")
        except OSError as e:
            logger.warning(f"Failed to delete {path}: {e}")
            failures.insert(0, DeleteFailure(path=os.fspath(path), error=e))

    logger.info(f"Deleted {removed} of {len(paths)} paths, {len(failures)} failed")

    if failures:
        raise BatchDeleteError(failures)
