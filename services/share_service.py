"""
Share-link protocol.

Each user is either Unshared (no ShareLink row) or Shared (exactly one row with a
stable hash). The unique constraints on ``share_links.user_id`` and
``share_links.hash`` make enabling an atomic conditional insert.
"""

import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from errors import NotFound, StoreError
from extensions import db
from helpers.share_hash import generate_share_hash
from models.content import Content
from models.share_link import ShareLink
from models.user import User

logger = logging.getLogger(__name__)


def enable_share(user_id: int) -> str:
    """
    Publish the user's content and return the share hash.

    Repeated calls return the same hash while the link is live. A concurrent
    enable that wins the insert race is detected through the unique constraint
    on ``user_id`` and its hash is returned instead. Collisions with another
    user's hash are retried with a fresh hash.

    Raises:
        StoreError: If the store fails or no unique hash could be issued.
    """
    length = current_app.config.get("SHARE_HASH_LENGTH", 10)
    max_attempts = current_app.config.get("SHARE_HASH_MAX_ATTEMPTS", 5)

    try:
        existing = ShareLink.find_by_user(user_id)
        if existing:
            return existing.hash

        for attempt in range(1, max_attempts + 1):
            share_link = ShareLink(user_id=user_id, hash=generate_share_hash(length))
            db.session.add(share_link)
            try:
                db.session.commit()
            except IntegrityError:
                db.session.rollback()
                winner = ShareLink.find_by_user(user_id)
                if winner:
                    logger.info(
                        f"Concurrent share enable for user_id: {user_id}, "
                        "returning existing link"
                    )
                    return winner.hash
                logger.warning(
                    f"Share hash collision for user_id: {user_id} "
                    f"(attempt {attempt}/{max_attempts})"
                )
                continue

            logger.info(f"Share link created for user_id: {user_id}")
            return share_link.hash
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during link creation for user_id: {user_id}")
        raise StoreError("Error during link creation")

    logger.error(
        f"Could not issue a unique share hash for user_id: {user_id} "
        f"after {max_attempts} attempts"
    )
    raise StoreError("Error during link creation")


def disable_share(user_id: int) -> bool:
    """Remove the user's share link. Returns False when there was none."""
    try:
        deleted = ShareLink.query.filter_by(user_id=user_id).delete()
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during link deletion for user_id: {user_id}")
        raise StoreError("Error during link deletion")

    if deleted:
        logger.info(f"Share link removed for user_id: {user_id}")
    return bool(deleted)


def resolve_share(hash_value: str) -> dict:
    """
    Resolve a public share hash into the owner's username and live content.

    Raises:
        NotFound: If the hash is not live or its owner no longer exists.
        StoreError: If any lookup fails.
    """
    try:
        share_link = ShareLink.find_by_hash(hash_value)
        if not share_link:
            raise NotFound("Link not found")

        content = Content.owned_by(share_link.user_id).all()
        owner = db.session.get(User, share_link.user_id)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during link retrieval for hash: {hash_value}")
        raise StoreError("Error during link retrieval")

    if owner is None:
        logger.warning(
            f"Share link {hash_value} points at missing user_id: {share_link.user_id}"
        )
        raise NotFound("User not found")

    return {
        "username": owner.username,
        "content": [item.to_dict() for item in content],
    }
