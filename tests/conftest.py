"""Test configuration and fixtures."""

import logfire
import pytest
from fastapi.testclient import TestClient

# Keep telemetry local and quiet while testing.
# Must run before the app module is imported.
logfire.configure(send_to_logfire=False, console=False)

from persona.interface.api.app import create_app  # noqa: E402
from tests.di import build_test_container  # noqa: E402


@pytest.fixture
def client():
    """Test client over an app wired to in-memory persistence.

    Entering the client runs the lifespan, which seeds the default profile.
    """
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unseeded_client():
    """Test client whose lifespan never runs, so the store starts empty."""
    app = create_app(build_test_container())
    return TestClient(app)
