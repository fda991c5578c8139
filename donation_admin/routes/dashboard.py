# donation_admin/routes/dashboard.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..services import analytics, stats

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api")


@dashboard_bp.get("/dashboard/stats")
@jwt_required()
def get_dashboard_stats():
    return jsonify(stats.get_stats()), 200


@dashboard_bp.get("/analytics/monthly")
@jwt_required()
def get_monthly_analytics():
    try:
        months = analytics.monthly_totals()
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to fetch monthly analytics") from exc
    return jsonify(months), 200
