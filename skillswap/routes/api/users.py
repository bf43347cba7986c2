from flask import Blueprint, jsonify, request

from skillswap.routes.api.serializers import serialize_row, serialize_rows
from skillswap.services import get_services

api_user_bp = Blueprint("api_user", __name__)


@api_user_bp.get("")
def list_users():
    return jsonify(serialize_rows(get_services().users.list_users()))


@api_user_bp.post("")
def create_user():
    payload = request.get_json(silent=True) or {}
    user = get_services().users.create_user(
        name=payload.get("name"),
        email=payload.get("email"),
        password=payload.get("password"),
    )
    return jsonify(user)


@api_user_bp.get("/<int:user_id>")
def get_user(user_id):
    return jsonify(serialize_row(get_services().users.get_user(user_id)))
