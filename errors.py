"""
Error taxonomy for the brain API.

Services raise these exceptions; the application factory registers a single
handler that renders them as ``{"message": ...}`` JSON with the matching status.
"""


class BrainError(Exception):
    """Base exception for all errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class ValidationError(BrainError):
    """Required fields are missing or malformed."""

    status_code = 400


class Conflict(BrainError):
    """The record already exists (e.g. a duplicate username)."""

    status_code = 409


class Unauthenticated(BrainError):
    """The bearer credential is missing or failed verification."""

    status_code = 401


class InvalidCredentials(BrainError):
    """Username/password pair did not match a user."""

    status_code = 401


class NotFound(BrainError):
    """A share hash or its owner could not be resolved."""

    status_code = 404


class StoreError(BrainError):
    """The persistence layer failed. The message is always generic."""

    status_code = 500
