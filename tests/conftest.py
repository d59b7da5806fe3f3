from contextlib import ExitStack

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core import config
from app.main import create_app

TEST_BASE_URL = "https://example.com/"

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Restore settings that individual tests override"""
    original_propagate = config.settings.PROPAGATE_UPSTREAM_STATUS
    original_env = config.settings.APP_ENV
    original_redirect = config.settings.HTTPS_REDIRECT

    yield

    config.settings.PROPAGATE_UPSTREAM_STATUS = original_propagate
    config.settings.APP_ENV = original_env
    config.settings.HTTPS_REDIRECT = original_redirect

@pytest.fixture
def make_client():
    """
    Build a TestClient whose outbound calls are answered by `handler`.

    Server exceptions are not re-raised so unhandled faults show up as 500.
    """
    with ExitStack() as stack:
        def _make(handler):
            app = create_app(transport=httpx.MockTransport(handler), base_url=TEST_BASE_URL)
            return stack.enter_context(TestClient(app, raise_server_exceptions=False))

        yield _make
