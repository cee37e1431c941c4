import pytest
from fastapi.testclient import TestClient

from http_toolkit.core.config import Settings
from http_toolkit.main import create_app
from tests.unit.fakes.file_storage import FakeFileStorage
from tests.unit.fakes.name_generator import SequentialNameGenerator

@pytest.fixture
def storage() -> FakeFileStorage:
    return FakeFileStorage()

@pytest.fixture
def name_generator() -> SequentialNameGenerator:
    return SequentialNameGenerator()

@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path

@pytest.fixture
def make_settings(upload_dir):
    def _make(**overrides) -> Settings:
        values = {"UPLOAD_DIR": str(upload_dir)}
        values.update(overrides)
        # _env_file=None keeps a developer's .env out of the tests
        return Settings(_env_file=None, **values)

    return _make

@pytest.fixture
def make_client(make_settings):
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(make_settings(**overrides)))

    return _make

@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
