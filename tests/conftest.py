from fastapi.testclient import TestClient
from Config.settings import Settings
from main import create_app
import pytest


@pytest.fixture
def settings():
    return Settings(airtable_pat="pat-test-token")


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
