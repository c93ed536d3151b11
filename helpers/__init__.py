"""
Brain Helpers Package

This package contains helper modules shared by the services and views.

Modules:
- tokens: Signing and verifying bearer access tokens
- auth: The Flask-Login bearer-token gate for protected routes
- share_hash: Random hashes for public share links
- request_data: Lenient JSON body parsing for API requests
"""

from .tokens import (
    TokenError,
    create_access_token,
    decode_access_token,
    extract_bearer_token,
)
from .share_hash import generate_share_hash

__all__ = [
    "TokenError",
    "create_access_token",
    "decode_access_token",
    "extract_bearer_token",
    "generate_share_hash",
]
