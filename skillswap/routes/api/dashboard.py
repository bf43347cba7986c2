from flask import Blueprint, jsonify

from skillswap.extensions import cache
from skillswap.services import get_services

api_dashboard_bp = Blueprint("api_dashboard", __name__)


@api_dashboard_bp.get("/stats")
@cache.cached(timeout=60)
def dashboard_stats():
    return jsonify(get_services().reporting.dashboard_stats())
