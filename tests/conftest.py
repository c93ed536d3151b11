import os

# Set TESTING environment variable before any imports to prevent config issues
os.environ["TESTING"] = "true"
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-0123456789abcdefghij")

import pytest

from app import create_app, db as _db
from config import Config


class TestConfig(Config):
    """Configuration used by the test application."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-jwt-secret-0123456789abcdefghij"
    # bcrypt's minimum work factor keeps the suite fast
    BCRYPT_ROUNDS = 4


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """
    Session-scoped fixture that automatically sets up the test environment.
    This runs before any tests and ensures TESTING environment variable is set.
    """
    yield
    # Cleanup after all tests
    if "TESTING" in os.environ:
        del os.environ["TESTING"]


@pytest.fixture(scope="session")
def app():
    """
    Session-scoped test Flask application backed by an in-memory SQLite database.
    """
    flask_app = create_app(TestConfig)
    yield flask_app


@pytest.fixture()
def client(app):
    """
    Function-scoped test client for making HTTP requests.
    """
    return app.test_client()


@pytest.fixture()
def db(app):
    """
    Function-scoped test database with complete isolation.
    Each test gets its own fresh set of tables.

    No application context is held while the test runs, so every request made
    through the test client gets its own context, as in production.
    """
    with app.app_context():
        _db.create_all()

    yield _db

    with app.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db, app):
    """
    Provides a database session inside an application context.
    Used by model and service tests that do not go through HTTP.
    """
    with app.app_context():
        yield _db.session
        _db.session.rollback()


@pytest.fixture
def cli_runner(app):
    """
    Custom CLI runner for testing CLI commands.
    """
    return app.test_cli_runner()
