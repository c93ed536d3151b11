import secrets
import string

SHARE_HASH_ALPHABET = string.ascii_letters + string.digits


def generate_share_hash(length=10):
    """Return a random alphanumeric hash for a public share link."""
    if length < 1:
        raise ValueError("Share hash length must be positive")
    return "".join(secrets.choice(SHARE_HASH_ALPHABET) for _ in range(length))
