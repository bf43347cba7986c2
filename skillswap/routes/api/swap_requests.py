from flask import Blueprint, jsonify, request

from skillswap.routes.api.serializers import serialize_rows
from skillswap.services import get_services

api_swap_request_bp = Blueprint("api_swap_request", __name__)


@api_swap_request_bp.post("")
def create_swap_request():
    payload = request.get_json(silent=True) or {}
    created = get_services().swap_requests.create_request(
        from_user_id=payload.get("from_user_id"),
        to_user_id=payload.get("to_user_id"),
        offered_skill=payload.get("offered_skill"),
        wanted_skill=payload.get("wanted_skill"),
        message=payload.get("message"),
    )
    return jsonify({"success": True, "id": created["id"], "message": "Swap request sent successfully"})


@api_swap_request_bp.get("/received/<int:user_id>")
def received_requests(user_id):
    return jsonify(serialize_rows(get_services().swap_requests.list_requests(user_id, "received")))


@api_swap_request_bp.get("/sent/<int:user_id>")
def sent_requests(user_id):
    return jsonify(serialize_rows(get_services().swap_requests.list_requests(user_id, "sent")))


@api_swap_request_bp.put("/<int:request_id>")
def update_status(request_id):
    payload = request.get_json(silent=True) or {}
    result = get_services().swap_requests.transition_request(request_id, payload.get("status"))
    return jsonify({"success": True, "message": f"Swap request {result['status']}"})
