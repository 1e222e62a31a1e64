"""
Pytest configuration and shared fixtures for Postboard tests.
"""

import os
import random
import sys
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

# Set test environment before importing app
os.environ["FLASK_ENV"] = "testing"
os.environ["FLASK_SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["SESSION_SECRET"] = "test-session-secret-0123456789abcdef"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["FORCE_HTTPS"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

TEST_SESSION_SECRET = "test-session-secret-0123456789abcdef"


@pytest.fixture
def store():
    """Seeded post store with a fixed random source and a fixed clock."""
    from postboard.seed import seed_posts
    from postboard.store import PostStore

    ticks = iter(range(10_000))
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def clock():
        return base + timedelta(minutes=next(ticks))

    return PostStore(seed_posts(), rng=random.Random(1234), clock=clock)


@pytest.fixture
def app(store):
    """Create and configure a test Flask application instance."""
    from postboard.factory import create_app

    flask_app = create_app(store=store)
    flask_app.config.update({"TESTING": True})

    with flask_app.app_context():
        yield flask_app


@pytest.fixture
def client(app):
    """Create a test client for the Flask application."""
    return app.test_client()


@pytest.fixture
def app_config(app):
    return app.config["APP_CONFIG"]


@pytest.fixture
def session_token(app_config):
    """Valid session token for the demo user."""
    from postboard.tokens import issue_session_token

    return issue_session_token(app_config, sub="demo-user-id", name="DemoUser", email="demo@example.com")


@pytest.fixture
def auth_headers(session_token):
    """Provide authentication headers for API requests."""
    return {"Authorization": f"Bearer {session_token}", "Content-Type": "application/json"}


@pytest.fixture
def expired_token(app_config):
    """Session token that expired an hour ago."""
    import jwt

    now = datetime.now(timezone.utc)
    payload = {
        "iss": app_config["JWT_ISSUER"],
        "aud": app_config["JWT_AUDIENCE"],
        "sub": "demo-user-id",
        "name": "DemoUser",
        "iat": now - timedelta(hours=2),
        "exp": now - timedelta(hours=1),
    }
    return jwt.encode(payload, TEST_SESSION_SECRET, algorithm="HS256")


@pytest.fixture
def mock_audit_logger():
    """Mock audit logger for testing."""
    return MagicMock()


# Pytest configuration hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Add 'unit' marker to tests in unit/ directory
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        # Add 'integration' marker to tests in integration/ directory
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
