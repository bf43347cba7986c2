from flask import Blueprint, jsonify

from skillswap.routes.api.admin import api_admin_bp
from skillswap.routes.api.chat import api_chat_bp
from skillswap.routes.api.dashboard import api_dashboard_bp
from skillswap.routes.api.notifications import api_notification_bp
from skillswap.routes.api.swap_requests import api_swap_request_bp
from skillswap.routes.api.users import api_user_bp

api_bp = Blueprint("api", __name__)
api_bp.register_blueprint(api_user_bp, url_prefix="/users")
api_bp.register_blueprint(api_swap_request_bp, url_prefix="/swap-requests")
api_bp.register_blueprint(api_notification_bp, url_prefix="/notifications")
api_bp.register_blueprint(api_chat_bp, url_prefix="/chat")
api_bp.register_blueprint(api_dashboard_bp, url_prefix="/dashboard")
api_bp.register_blueprint(api_admin_bp, url_prefix="/admin")


@api_bp.get("/health")
def health():
    return jsonify({"status": "ok"})
