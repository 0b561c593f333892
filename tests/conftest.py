"""
Central pytest configuration for the real-estate backend tests.

Sets the test environment before any application import, and provides
database, Flask app and client fixtures plus marker assignment by
test location.
"""

import os

# Test database configuration (set early so the lazy engine uses it)
TEST_DATABASE_URL = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TESTING"] = "true"  # Set testing environment variable
os.environ["RATE_LIMIT_ENABLED"] = "0"  # Disable rate limiting in tests
os.environ.setdefault("LOG_TO_FILE", "0")

import pytest  # noqa: E402

from realestate.db.session import SessionLocal, create_tables, drop_tables  # noqa: E402


# =====================================================
# DATABASE FIXTURES
# =====================================================


@pytest.fixture
def db_session():
    """Fresh schema per test; yields a session bound to the in-memory database."""
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        drop_tables()


# =====================================================
# FLASK FIXTURES
# =====================================================


@pytest.fixture
def app(db_session):
    """Flask application configured for testing (rate limiting off)."""
    from realestate.main import create_app

    flask_app = create_app({"TESTING": True, "RATELIMIT_ENABLED": False})
    yield flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


# =====================================================
# MARKERS
# =====================================================


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        if f"{os.sep}api{os.sep}" in path:
            item.add_marker(pytest.mark.api)


def pytest_configure(config):
    """Register the markers used across the suite."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "validation: mark test as validation-related")
