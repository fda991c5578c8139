# donation_admin/routes/auth.py
from flask import Blueprint, jsonify, request

from .. import security
from ..schemas import AuthSchema, validate

auth_bp = Blueprint("auth", __name__, url_prefix="/api")


@auth_bp.post("/auth/login")
def login():
    data = validate(AuthSchema, request.get_json(silent=True), "Invalid login data")
    token = security.login(data.username, data.accessKey)
    return jsonify(token=token, username=data.username), 200
