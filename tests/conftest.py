"""Shared pytest fixtures for all tests."""

import hashlib

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from starlette.requests import ClientDisconnect

from filestore.file_storage import delete_files, write_file
from httpkit.error_handlers import create_app
from httpkit.responses import MessageError, json_ok, json_response
from httpkit.uploads import get_file_contents, require_id
from svcutil.exceptions import SvcUtilError, TransportError
from svcutil.ids import new_id


@pytest.fixture
def sample_bytes():
    """
    Sample upload contents.
    """
    return b'Sample content for testing'


@pytest.fixture
def sample_checksum(sample_bytes):
    """
    SHA-256 of sample_bytes, lowercase hex.
    """
    return hashlib.sha256(sample_bytes).hexdigest()


@pytest.fixture
def sample_file(tmp_path, sample_bytes):
    """
    Create a sample file on disk.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to sample file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_bytes(sample_bytes)
    return file_path


@pytest.fixture
def multiple_sample_files(tmp_path):
    """
    Create multiple sample files for testing bulk operations.

    Returns:
        List of Paths to sample files
    """
    files = []
    for i in range(3):
        file_path = tmp_path / f'test{i}.txt'
        file_path.write_text(f'Sample content {i}')
        files.append(file_path)
    return files


@pytest.fixture
def upload_dir(tmp_path):
    """
    Directory the test service stores uploads in.
    """
    directory = tmp_path / 'uploads'
    directory.mkdir()
    return directory


@pytest.fixture
def app(upload_dir):
    """
    Small service wired with svcutil dependencies and handlers.
    """
    app = create_app("svcutil-test")

    @app.post("/upload")
    async def upload(name: str, contents: bytes = Depends(get_file_contents)):
        persisted = write_file(upload_dir / name, contents)
        return json_response({"name": name, "size": persisted.size}, 201)

    @app.post("/items")
    async def get_item(id_: str = Depends(require_id)):
        return json_response({"id": id_})

    @app.get("/items")
    async def get_item_by_query(id_: str = Depends(require_id)):
        return json_response({"id": id_})

    @app.delete("/uploads")
    async def delete_uploads(names: str):
        delete_files(*(upload_dir / name for name in names.split(',')))
        return json_ok()

    @app.get("/teapot")
    async def teapot():
        raise MessageError("short and stout", 418)

    @app.get("/broken")
    async def broken():
        (upload_dir / 'missing' / 'file.txt').read_bytes()

    @app.post("/ids")
    async def create_id():
        return json_response({"id": new_id()}, 201)

    @app.get("/stalled")
    async def stalled():
        raise TransportError(f"socket closed while reading {upload_dir / 'part.bin'}")

    @app.get("/generic")
    async def generic():
        raise SvcUtilError(f"unexpected state in {upload_dir}")

    @app.post("/disconnect")
    async def disconnect():
        raise ClientDisconnect()

    return app


@pytest.fixture
def client(app):
    """Create FastAPI test client."""
    return TestClient(app)
