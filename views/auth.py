from flask import Blueprint, jsonify

from helpers.request_data import get_json_body
from services.identity_service import authenticate_user, register_user

bp = Blueprint("auth", __name__)


@bp.route("/signup", methods=["POST"])
def signup():
    """Register a new user."""
    data = get_json_body()
    register_user(data.get("username"), data.get("password"))
    return jsonify({"message": "User created successfully"}), 201


@bp.route("/signin", methods=["POST"])
def signin():
    """Exchange a username and password for a bearer token."""
    data = get_json_body()
    token = authenticate_user(data.get("username"), data.get("password"))
    return jsonify({"message": "Signed in successfully", "token": token})
