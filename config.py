import os
from datetime import timedelta
import logging

config_logger = logging.getLogger(__name__)


class Config:
    """Base configuration class."""

    # Flask configuration
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-please-change")

    # API routing
    API_PREFIX = os.environ.get("API_PREFIX", "/api/v1")

    # Database configuration
    # Construct default SQLite path relative to this config file's directory
    _DEFAULT_SQLITE_PATH = os.path.join(
        os.path.abspath(os.path.dirname(__file__)), "brain.db"
    )
    _DEFAULT_SQLALCHEMY_DATABASE_URI = "sqlite:///" + _DEFAULT_SQLITE_PATH

    database_url_env = os.environ.get("DATABASE_URL")
    if database_url_env:
        if database_url_env.startswith("postgres://"):
            # Handle Heroku-style 'postgres://' prefix
            SQLALCHEMY_DATABASE_URI = database_url_env.replace(
                "postgres://", "postgresql://", 1
            )
        else:
            SQLALCHEMY_DATABASE_URI = database_url_env
    else:
        SQLALCHEMY_DATABASE_URI = _DEFAULT_SQLALCHEMY_DATABASE_URI

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Token signing
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_IN = timedelta(hours=int(os.environ.get("JWT_EXPIRES_HOURS", 168)))

    # Password hashing work factor
    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 13))

    # Share links
    SHARE_HASH_LENGTH = int(os.environ.get("SHARE_HASH_LENGTH", 10))
    SHARE_HASH_MAX_ATTEMPTS = int(os.environ.get("SHARE_HASH_MAX_ATTEMPTS", 5))

    # The signing secret is required outside of tests
    TESTING = os.environ.get("TESTING", "false").lower() == "true"
    if not TESTING:
        if not JWT_SECRET_KEY:
            raise ValueError("JWT_SECRET_KEY is required to sign access tokens")
    elif not JWT_SECRET_KEY:
        JWT_SECRET_KEY = "test-jwt-secret-0123456789abcdefghij"


# Log which database backend the configuration points at.
# This runs when the config module is first imported.
if Config.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
    config_logger.info("Configuration: using a local SQLite database.")
else:
    config_logger.info(
        "Configuration: using database scheme "
        f"'{Config.SQLALCHEMY_DATABASE_URI.split(':')[0]}'."
    )
