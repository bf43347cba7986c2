from flask import Blueprint, jsonify

from skillswap.routes.api.serializers import serialize_rows
from skillswap.services import get_services

api_notification_bp = Blueprint("api_notification", __name__)


@api_notification_bp.get("/<int:user_id>")
def user_notifications(user_id):
    return jsonify(serialize_rows(get_services().notifications.list_for_user(user_id)))


@api_notification_bp.put("/<int:notification_id>/read")
def mark_read(notification_id):
    get_services().notifications.mark_read(notification_id)
    return jsonify({"success": True})


@api_notification_bp.put("/<int:user_id>/read-all")
def mark_all_read(user_id):
    get_services().notifications.mark_all_read(user_id)
    return jsonify({"success": True})


@api_notification_bp.get("/<int:user_id>/unread-count")
def unread_count(user_id):
    return jsonify({"count": get_services().notifications.unread_count(user_id)})
