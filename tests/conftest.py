from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from app.config.config import Settings, get_settings
from app.main import app


@pytest.fixture
def settings():
    return Settings(
        rapidapi_key="test-rapidapi-key",
        translation_api_key="sk-test",
        request_timeout=5,
    )


@pytest.fixture
def client(settings):
    """Test client with settings that never come from the real environment."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_response():
    """Factory for fake requests responses."""
    def _make(status_code=200, json_data=None, text=""):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.text = text
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response
    return _make
