from flask import Blueprint, jsonify, request

from skillswap.routes.api.serializers import serialize_rows
from skillswap.services import get_services

api_chat_bp = Blueprint("api_chat", __name__)


@api_chat_bp.get("/<int:swap_request_id>")
def list_messages(swap_request_id):
    return jsonify(serialize_rows(get_services().chat.list_messages(swap_request_id)))


@api_chat_bp.post("/<int:swap_request_id>")
def post_message(swap_request_id):
    payload = request.get_json(silent=True) or {}
    posted = get_services().chat.post_message(
        swap_request_id,
        sender_id=payload.get("sender_id"),
        receiver_id=payload.get("receiver_id"),
        message=payload.get("message"),
    )
    return jsonify({"success": True, "id": posted["id"], "message": "Message sent successfully"})


@api_chat_bp.get("/user/<int:user_id>")
def conversations(user_id):
    return jsonify(serialize_rows(get_services().chat.list_conversations(user_id)))
