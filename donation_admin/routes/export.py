from flask import Blueprint, send_file
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..services import export

export_bp = Blueprint("export", __name__, url_prefix="/api")


@export_bp.get("/export/expenses")
@jwt_required()
def export_expenses():
    """Stream every expense as an .xlsx attachment, built fresh per request."""
    try:
        buf = export.export_expenses()
    except SQLAlchemyError as exc:
        raise PersistenceError("Failed to export expenses") from exc
    return send_file(
        buf,
        mimetype=export.XLSX_MIMETYPE,
        as_attachment=True,
        download_name=export.EXPORT_FILENAME,
        max_age=0,
    )
