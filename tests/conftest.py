from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fw_drop.backend.app.core.deps import get_file_storage
from fw_drop.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage
from fw_drop.backend.app.main import create_app
from tests.unit.fakes.file_storage import FakeFileStorage


@pytest.fixture
def storage() -> FakeFileStorage:
    return FakeFileStorage()


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    # deliberately not created, the first upload has to do it
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_dir):
    app = create_app()
    app.dependency_overrides[get_file_storage] = lambda: FilesystemFileStorage(upload_dir)
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
