"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from digest_server.config import Settings
from digest_server.main import create_app


@pytest.fixture
def site_dir(tmp_path):
    """Empty static directory; the env file goes here too."""
    return tmp_path


@pytest.fixture
def settings(site_dir):
    return Settings(STATIC_DIR=str(site_dir))


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
