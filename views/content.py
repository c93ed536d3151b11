from flask import Blueprint, jsonify
from flask_login import login_required, current_user

from helpers.request_data import get_json_body
from services.content_service import (
    create_content_item,
    delete_content_item,
    list_content_items,
)

bp = Blueprint("content", __name__)


@bp.route("/content", methods=["POST"])
@login_required
def create_content():
    """Save a new link for the current user."""
    data = get_json_body()
    content = create_content_item(
        current_user.id, data.get("link"), data.get("type"), data.get("title")
    )
    return jsonify({"message": "Content added", "content": content.to_dict()})


@bp.route("/content", methods=["GET"])
@login_required
def list_content():
    """List the current user's saved links."""
    return jsonify({"content": list_content_items(current_user.id)})


@bp.route("/content", methods=["DELETE"])
@login_required
def delete_content():
    """Delete one of the current user's links. Unknown ids are ignored."""
    data = get_json_body()
    delete_content_item(current_user.id, data.get("contentId"))
    return jsonify({"message": "Deleted"})
