"""
Central pytest configuration for the employee records service tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests.
"""

import os

# Test database configuration (set early so lazily built engines use it)
os.environ["DATABASE_URL"] = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["TESTING"] = "true"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SQL_ECHO"] = "false"

import pytest  # noqa: E402

from ems.db.session import SessionLocal, create_tables, drop_tables  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "database: mark test as database-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "employee: mark test as employee-related")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


# =====================================================
# DATABASE FIXTURES
# =====================================================


@pytest.fixture
def db_session():
    """Provide a session on a freshly created schema, dropped afterwards."""
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        drop_tables()


# =====================================================
# APPLICATION FIXTURES
# =====================================================


@pytest.fixture
def app():
    """Create the Flask application against the in-memory database."""
    from ems.main import create_app

    flask_app = create_app()
    yield flask_app
    drop_tables()


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


# =====================================================
# SAMPLE DATA
# =====================================================


@pytest.fixture
def john_doe_payload():
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@doe.com",
        "departmentCode": "Compro",
    }
