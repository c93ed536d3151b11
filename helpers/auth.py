"""
Bearer-token authentication gate.

Flask-Login's ``request_loader`` turns a verified Authorization header into a
``TokenIdentity`` for ``current_user``; ``login_required`` halts the request
with 401 when no identity could be loaded.
"""

import logging

from flask import current_app, jsonify
from flask_login import UserMixin

from errors import Unauthenticated
from helpers.tokens import TokenError, decode_access_token, extract_bearer_token

logger = logging.getLogger(__name__)

AUTH_HEADER = "Authorization"


class TokenIdentity(UserMixin):
    """The acting user, as proven by a verified token. Carries only the id."""

    def __init__(self, user_id):
        self.id = user_id

    def __repr__(self):
        return f"<TokenIdentity {self.id}>"


def load_identity_from_request(request):
    """Verify the request's bearer token; return a TokenIdentity or None."""
    token = extract_bearer_token(request.headers.get(AUTH_HEADER))
    if token is None:
        return None

    try:
        user_id = decode_access_token(
            token,
            current_app.config["JWT_SECRET_KEY"],
            algorithm=current_app.config.get("JWT_ALGORITHM", "HS256"),
        )
    except TokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None

    return TokenIdentity(user_id)


def unauthorized():
    """Response for protected routes reached without a valid token."""
    error = Unauthenticated("You are not logged in")
    response = jsonify(error.to_dict())
    response.status_code = error.status_code
    response.headers["WWW-Authenticate"] = "Bearer"
    return response


def init_auth(login_manager):
    """Wire the bearer-token gate into a Flask-Login manager."""
    login_manager.request_loader(load_identity_from_request)
    login_manager.unauthorized_handler(unauthorized)
