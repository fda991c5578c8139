from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..models import Beneficiary
from ..schemas import BeneficiarySchema, validate

beneficiaries_bp = Blueprint("beneficiaries", __name__, url_prefix="/api")


@beneficiaries_bp.get("/beneficiaries")
@jwt_required()
def list_beneficiaries():
    try:
        beneficiaries = Beneficiary.newest_first()
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to fetch beneficiaries") from exc
    return jsonify([b.serialize() for b in beneficiaries]), 200


@beneficiaries_bp.post("/beneficiaries")
@jwt_required()
def create_beneficiary():
    data = validate(BeneficiarySchema, request.get_json(silent=True), "Invalid beneficiary data")
    beneficiary = Beneficiary.create(
        "Failed to create beneficiary",
        name=data.name,
        description=data.description,
        contact_info=data.contactInfo,
    )
    return jsonify(beneficiary.serialize()), 201
