# donation_admin/errors.py
from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Base class for errors that map onto a JSON error response."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message=None, details=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_dict(self):
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid data"


class InvalidCredentials(ApiError):
    status_code = 401
    message = "Invalid credentials"


class MissingToken(ApiError):
    status_code = 401
    message = "Access token required"


class InvalidToken(ApiError):
    status_code = 403
    message = "Invalid token"


class NotFound(ApiError):
    status_code = 404
    message = "Not Found"


class PersistenceError(ApiError):
    status_code = 500
    message = "Database operation failed"


class StatsUnavailable(ApiError):
    status_code = 500
    message = "Failed to fetch dashboard statistics"


class InternalError(ApiError):
    status_code = 500


def error_response(err):
    return jsonify(err.to_dict()), err.status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def _api_error(e):
        if e.status_code >= 500:
            cause = e.__cause__ or e
            app.logger.error("%s: %s", e.message, cause, exc_info=cause)
        else:
            app.logger.info("%s %s -> %s %s", request.method, request.path, e.status_code, e.message)
        return error_response(e)

    @app.errorhandler(HTTPException)
    def _http_error(e):
        return jsonify({"error": e.name}), e.code

    @app.errorhandler(Exception)
    def _unhandled(e):
        app.logger.exception("Unhandled exception: %s", e)
        return error_response(InternalError())
