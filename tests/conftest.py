import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from user_records_api.app.core.config import Settings
from user_records_api.app.core.store import RecordStore
from user_records_api.app.main import create_app
from user_records_api.app.services.user_service import UserService


@pytest.fixture()
def settings() -> Settings:
    return Settings(service_latency_ms=0, environment="test", api_version="9.9.9")


@pytest.fixture()
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture()
def service(store: RecordStore) -> UserService:
    return UserService(store)


@pytest.fixture()
def app(settings: Settings, store: RecordStore):
    return create_app(settings=settings, store=store)


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
