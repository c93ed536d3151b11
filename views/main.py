from flask import Blueprint, jsonify

bp = Blueprint("main", __name__)


@bp.route("/health")
def health():
    """Liveness probe. Does not touch the database."""
    return jsonify({"status": "ok"})
