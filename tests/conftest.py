# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from clientdesk.core.config import Settings
from clientdesk.main import create_app
from clientdesk.services.latency import NoLatency
from clientdesk.services.registry import build_registry


@pytest.fixture
def settings():
    return Settings(_env_file=None, simulated_latency=False, seed_dir=None, audit_log_file=None)


@pytest.fixture
def registry(settings):
    """Fresh registry with the embedded seeds and no simulated delay."""
    return build_registry(settings, latency=NoLatency())


@pytest.fixture
def empty_registry(settings):
    return build_registry(settings, latency=NoLatency(), seed=False)


@pytest.fixture
def client(settings, registry):
    app = create_app(settings=settings, registry=registry)
    with TestClient(app) as test_client:
        yield test_client
