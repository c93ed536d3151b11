import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from errors import Conflict, InvalidCredentials, StoreError, ValidationError
from extensions import db
from helpers.tokens import create_access_token
from models.user import User

logger = logging.getLogger(__name__)


def _require_credentials(username, password):
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError("Username and password are required")
    if not username.strip() or not password:
        raise ValidationError("Username and password are required")


def register_user(username: str, password: str) -> User:
    """
    Create a new user with a bcrypt-hashed password.

    Args:
        username: Unique, case-sensitive login name.
        password: Plain-text password; only its hash is stored.

    Returns:
        The created User.

    Raises:
        ValidationError: If either field is missing or blank.
        Conflict: If the username is already taken.
        StoreError: For any other database failure.
    """
    _require_credentials(username, password)

    try:
        if User.find_by_username(username):
            logger.warning(f"Signup rejected, username already exists: {username}")
            raise Conflict("User already exists")

        user = User(username=username)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same name
        db.session.rollback()
        logger.warning(f"Signup rejected by unique constraint: {username}")
        raise Conflict("User already exists")
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during signup for {username}")
        raise StoreError("Error during signup")

    logger.info(f"User created with ID: {user.id} ({username})")
    return user


def authenticate_user(username: str, password: str) -> str:
    """
    Verify a username/password pair and mint an access token.

    Unknown usernames and wrong passwords fail identically.

    Returns:
        A signed bearer token whose subject is the user id.

    Raises:
        ValidationError: If either field is missing or blank.
        InvalidCredentials: If the pair does not match a user.
        StoreError: If the user lookup fails.
    """
    _require_credentials(username, password)

    try:
        user = User.find_by_username(username)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during signin for {username}")
        raise StoreError("Error during signin")

    if not user or not user.check_password(password):
        logger.info(f"Failed signin attempt for {username}")
        raise InvalidCredentials("Invalid credentials")

    token = create_access_token(
        user.id,
        current_app.config["JWT_SECRET_KEY"],
        current_app.config["JWT_EXPIRES_IN"],
        algorithm=current_app.config.get("JWT_ALGORITHM", "HS256"),
    )
    logger.info(f"User {user.id} signed in")
    return token
