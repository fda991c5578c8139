from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..extensions import db
from ..models import Campaign, Donation, Expense
from ..schemas import CampaignSchema, validate

campaigns_bp = Blueprint("campaigns", __name__, url_prefix="/api")


def _campaigns_with_counts():
    donation_count = (
        select(func.count(Donation.id)).where(Donation.campaign_id == Campaign.id).scalar_subquery()
    )
    expense_count = (
        select(func.count(Expense.id)).where(Expense.campaign_id == Campaign.id).scalar_subquery()
    )
    return (
        db.session.query(Campaign, donation_count, expense_count)
        .order_by(Campaign.created_at.desc())
        .all()
    )


@campaigns_bp.get("/campaigns")
@jwt_required()
def list_campaigns():
    try:
        rows = _campaigns_with_counts()
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to fetch campaigns") from exc
    return jsonify([
        campaign.serialize(counts={"donations": donations, "expenses": expenses})
        for campaign, donations, expenses in rows
    ]), 200


@campaigns_bp.post("/campaigns")
@jwt_required()
def create_campaign():
    data = validate(CampaignSchema, request.get_json(silent=True), "Invalid campaign data")
    campaign = Campaign.create(
        "Failed to create campaign",
        name=data.name,
        description=data.description,
        target_amount=data.targetAmount,
        status=data.status,
    )
    return jsonify(campaign.serialize()), 201
