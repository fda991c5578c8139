from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..extensions import db
from ..models import Donation, Donor
from ..schemas import DonorSchema, validate

donors_bp = Blueprint("donors", __name__, url_prefix="/api")


@donors_bp.get("/donors")
@jwt_required()
def list_donors():
    donation_count = (
        select(func.count(Donation.id)).where(Donation.donor_id == Donor.id).scalar_subquery()
    )
    try:
        rows = db.session.query(Donor, donation_count).order_by(Donor.created_at.desc()).all()
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to fetch donors") from exc
    return jsonify([donor.serialize(counts={"donations": count}) for donor, count in rows]), 200


@donors_bp.post("/donors")
@jwt_required()
def create_donor():
    data = validate(DonorSchema, request.get_json(silent=True), "Invalid donor data")
    donor = Donor.create(
        "Failed to create donor",
        name=data.name,
        email=data.email,
        phone=data.phone,
        address=data.address,
    )
    return jsonify(donor.serialize()), 201
