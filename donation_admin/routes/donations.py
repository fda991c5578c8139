from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from ..errors import PersistenceError
from ..models import Donation
from ..schemas import DonationSchema, validate

donations_bp = Blueprint("donations", __name__, url_prefix="/api")


@donations_bp.get("/donations")
@jwt_required()
def list_donations():
    try:
        donations = Donation.newest_first(joinedload(Donation.donor), joinedload(Donation.campaign))
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to fetch donations") from exc
    return jsonify([d.serialize(include_related=True) for d in donations]), 200


@donations_bp.post("/donations")
@jwt_required()
def create_donation():
    # an unknown donorId/campaignId surfaces as a foreign key failure on commit
    data = validate(DonationSchema, request.get_json(silent=True), "Invalid donation data")
    donation = Donation.create(
        "Failed to create donation",
        amount=data.amount,
        donor_id=data.donorId,
        campaign_id=data.campaignId,
    )
    return jsonify(donation.serialize()), 201
