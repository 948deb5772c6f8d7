import pytest
from fastapi.testclient import TestClient

from dashboard_api.app.core.config import Settings
from dashboard_api.app.core.store import DashboardStore
from dashboard_api.app.main import create_app
from dashboard_api.app.services import DashboardServices

USER_ID = "default-user"


@pytest.fixture
def store():
    return DashboardStore()


@pytest.fixture
def config():
    return Settings(default_user_id=USER_ID, seed_demo_data=False, weather_api_key="test-key")


@pytest.fixture
def services(store, config):
    return DashboardServices(store, USER_ID, config)


@pytest.fixture
def client(store, config):
    app = create_app(store=store, config=config)
    with TestClient(app) as test_client:
        yield test_client
