"""
Access Token Helper Module

This module mints and verifies the signed bearer tokens handed out at signin.
Tokens are HS256 JWTs carrying the user id as their subject and an explicit
expiry; there is no server-side session store.
"""

import logging
from datetime import datetime, timezone

import jwt

# Set up logging
logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class TokenError(ValueError):
    """Raised when a bearer token cannot be verified."""

    pass


def create_access_token(user_id, secret, expires_in, algorithm="HS256", now=None):
    """
    Sign an access token for a user.

    Args:
        user_id: ID of the authenticated user, stored as the ``sub`` claim.
        secret: Process-wide signing secret.
        expires_in: ``timedelta`` after which the token is rejected.
        algorithm: JWT signing algorithm.
        now: Optional issue time, defaults to the current UTC time.

    Returns:
        The encoded token string.
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token, secret, algorithm="HS256"):
    """
    Verify an access token and return the user id it was issued for.

    Raises:
        TokenError: If the signature, expiry or subject claim is invalid.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise TokenError(f"Invalid token: {e}") from e

    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise TokenError("Token subject is not a user id") from e


def extract_bearer_token(header_value):
    """
    Pull the raw token out of an Authorization header value.

    Accepts both ``Bearer <token>`` and a bare token. Returns None when the
    header is missing or empty.
    """
    if not header_value:
        return None
    value = header_value.strip()
    if value.lower().startswith(BEARER_PREFIX.lower()):
        value = value[len(BEARER_PREFIX) :].strip()
    return value or None
