import logging

from sqlalchemy.exc import SQLAlchemyError

from errors import StoreError, ValidationError
from extensions import db
from models.content import Content
from models.user import User

logger = logging.getLogger(__name__)

# Largest value a BIGINT primary key can hold
MAX_CONTENT_ID = 2**63 - 1


def create_content_item(user_id: int, link, content_type, title) -> Content:
    """
    Save a link for the acting user.

    Args:
        user_id: ID of the authenticated user; becomes the owner.
        link: The URL being saved.
        content_type: Free-form type tag, e.g. "video" or "article".
        title: Display title.

    Returns:
        The created Content object, with an empty tag list.

    Raises:
        ValidationError: If link, type or title is missing.
        StoreError: If the insert fails.
    """
    if not link or not content_type or not title:
        raise ValidationError("Link, type, and title are required")

    try:
        content = Content(
            user_id=user_id,
            link=link,
            type=content_type,
            title=title,
            tags=[],
        )
        db.session.add(content)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during content creation for user_id: {user_id}")
        raise StoreError("Error during content creation")

    logger.info(f"Content {content.id} created for user_id: {user_id}")
    return content


def list_content_items(user_id: int) -> list[dict]:
    """Return every item owned by the user, annotated with the owner's username."""
    try:
        rows = (
            db.session.query(Content, User.username)
            .join(User, Content.user_id == User.id)
            .filter(Content.user_id == user_id)
            .order_by(Content.id)
            .all()
        )
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error during content retrieval for user_id: {user_id}")
        raise StoreError("Error during content retrieval")

    return [content.to_dict(username=username) for content, username in rows]


def delete_content_item(user_id: int, content_id) -> int:
    """
    Delete one of the user's items.

    Deleting an id that does not exist or belongs to someone else is a silent
    no-op. Returns the number of rows removed.
    """
    if content_id is None or content_id == "":
        raise ValidationError("Content ID is required")
    if isinstance(content_id, bool) or (
        isinstance(content_id, float) and not content_id.is_integer()
    ):
        raise ValidationError("Content ID must be an integer")
    try:
        content_id = int(content_id)
    except (TypeError, ValueError):
        raise ValidationError("Content ID must be an integer")

    if not 0 < content_id <= MAX_CONTENT_ID:
        logger.info(
            f"Delete of content {content_id} by user_id: {user_id} is out of range"
        )
        return 0

    try:
        deleted = Content.query.filter_by(id=content_id, user_id=user_id).delete()
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(
            f"Error during content deletion of {content_id} for user_id: {user_id}"
        )
        raise StoreError("Error during content deletion")

    if deleted:
        logger.info(f"Content {content_id} deleted by user_id: {user_id}")
    else:
        logger.info(
            f"Delete of content {content_id} by user_id: {user_id} matched nothing"
        )
    return deleted
