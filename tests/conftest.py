"""
Pytest configuration and shared fixtures for the demo API tests.
"""
import logging

import pytest
from fastapi.testclient import TestClient

from employee_portal_api.app.core.config import Settings
from employee_portal_api.app.core.seed import default_seed_data
from employee_portal_api.app.main import create_app

# Show the service's debug logs in failing test output
logging.getLogger("employee_portal_api").setLevel(logging.DEBUG)


@pytest.fixture
def settings():
    """Settings independent of the caller's environment."""
    return Settings(
        project_name="企業員工管理系統",
        api_version="3.0.0",
        debug=False,
        log_level="INFO",
        log_file="",
        host="127.0.0.1",
        port=8080,
        cors_origins="*",
    )


@pytest.fixture
def seed():
    return default_seed_data()


@pytest.fixture
def app(settings, seed):
    return create_app(settings=settings, seed_data=seed)


@pytest.fixture
def client(app):
    return TestClient(app)
