from flask import Blueprint, jsonify, request

from skillswap.routes.api.serializers import serialize_rows
from skillswap.services import get_services

api_admin_bp = Blueprint("api_admin", __name__)


@api_admin_bp.put("/users/<int:user_id>/status")
def update_user_status(user_id):
    payload = request.get_json(silent=True) or {}
    return jsonify(get_services().users.set_status(user_id, payload.get("status")))


@api_admin_bp.post("/messages")
def send_message():
    payload = request.get_json(silent=True) or {}
    return jsonify(get_services().admin.send_message(payload.get("message")))


@api_admin_bp.get("/messages")
def recent_messages():
    return jsonify(serialize_rows(get_services().admin.recent_messages()))


@api_admin_bp.get("/logs")
def admin_logs():
    return jsonify(serialize_rows(get_services().admin.recent_logs()))


@api_admin_bp.get("/swap-stats")
def swap_stats():
    return jsonify(get_services().reporting.swap_status_counts())
