from flask import Blueprint, jsonify
from flask_login import login_required, current_user
import logging

from helpers.request_data import get_json_body
from services.share_service import disable_share, enable_share, resolve_share

logger = logging.getLogger(__name__)

bp = Blueprint("brain", __name__)


@bp.route("/brain/share", methods=["POST"])
@login_required
def share():
    """Turn the current user's public share link on or off."""
    data = get_json_body()

    if data.get("share"):
        share_hash = enable_share(current_user.id)
        return jsonify({"hash": share_hash})

    disable_share(current_user.id)
    return jsonify({"message": "Removed link"})


@bp.route("/brain/<share_link>", methods=["GET"])
def shared_brain(share_link):
    """Public, read-only view of a shared collection."""
    logger.info(f"Resolving share link {share_link}")
    return jsonify(resolve_share(share_link))
