from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from ..errors import PersistenceError
from ..extensions import db
from ..models import Expense, commit
from ..schemas import ExpenseSchema, validate

expenses_bp = Blueprint("expenses", __name__, url_prefix="/api")


@expenses_bp.get("/expenses")
@jwt_required()
def list_expenses():
    """All expenses, newest first, each with its campaign."""
    try:
        expenses = Expense.newest_first(joinedload(Expense.campaign))
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to fetch expenses") from exc
    return jsonify([e.serialize(include_related=True) for e in expenses]), 200


@expenses_bp.post("/expenses")
@jwt_required()
def create_expense():
    data = validate(ExpenseSchema, request.get_json(silent=True), "Invalid expense data")
    expense = Expense.create(
        "Failed to create expense",
        description=data.description,
        amount=data.amount,
        category=data.category,
        campaign_id=data.campaignId,
    )
    return jsonify(expense.serialize()), 201


@expenses_bp.put("/expenses/<expense_id>")
@jwt_required()
def update_expense(expense_id):
    expense = Expense.get_or_raise(expense_id, "Expense not found")
    data = validate(ExpenseSchema, request.get_json(silent=True), "Invalid expense data")
    expense.apply(data.description, data.amount, data.category, data.campaignId)
    commit("Failed to update expense")
    return jsonify(expense.serialize()), 200


@expenses_bp.delete("/expenses/<expense_id>")
@jwt_required()
def delete_expense(expense_id):
    expense = Expense.get_or_raise(expense_id, "Expense not found")
    db.session.delete(expense)
    commit("Failed to delete expense")
    return jsonify(message="Expense deleted successfully", id=expense_id), 200
