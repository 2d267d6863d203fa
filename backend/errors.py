"""
errors.py - API error codes, the ApiError exception and JSON error handlers
"""

from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from logger import get_logger

logger = get_logger("errors")


class ErrorCodes:
    # Auth errors
    AUTH_INVALID_CREDENTIALS = "AUTH_001"
    AUTH_USER_NOT_FOUND = "AUTH_002"
    AUTH_EMAIL_EXISTS = "AUTH_003"
    AUTH_UNAUTHORIZED = "AUTH_004"
    AUTH_TOKEN_EXPIRED = "AUTH_005"
    ACCOUNT_PENDING = "AUTH_006"
    FORBIDDEN = "AUTH_007"

    # Validation errors
    VALIDATION_FAILED = "VAL_001"
    INVALID_INPUT = "VAL_002"

    # Database errors
    DATABASE_ERROR = "DB_001"
    NOT_FOUND = "DB_002"

    # AI / external service errors
    AI_SERVICE_ERROR = "AI_001"
    AI_QUOTA_EXCEEDED = "AI_002"

    # General errors
    INTERNAL_ERROR = "ERR_001"
    BAD_REQUEST = "ERR_002"


class ApiError(Exception):
    """An error that maps directly onto a JSON error response."""

    def __init__(self, code, message, status=400, details=None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.details = details

    def to_dict(self, include_details=True):
        body = {"success": False, "error": self.message, "code": self.code}
        if include_details and self.details is not None:
            body["details"] = self.details
        return body


# -------------------- Common errors --------------------
def unauthorized(message="Unauthorized"):
    return ApiError(ErrorCodes.AUTH_UNAUTHORIZED, message, 401)


def token_expired():
    return ApiError(ErrorCodes.AUTH_TOKEN_EXPIRED, "Token expired", 401)


def invalid_credentials():
    return ApiError(ErrorCodes.AUTH_INVALID_CREDENTIALS, "Invalid email or password", 401)


def email_exists():
    return ApiError(ErrorCodes.AUTH_EMAIL_EXISTS, "Email already registered", 409)


def account_pending():
    return ApiError(ErrorCodes.ACCOUNT_PENDING, "Account pending approval", 403)


def forbidden(message="Forbidden"):
    return ApiError(ErrorCodes.FORBIDDEN, message, 403)


def not_found(resource="Resource"):
    return ApiError(ErrorCodes.NOT_FOUND, f"{resource} not found", 404)


def bad_request(message="Bad request"):
    return ApiError(ErrorCodes.BAD_REQUEST, message, 400)


def validation_failed(issues):
    return ApiError(ErrorCodes.VALIDATION_FAILED, "Validation failed", 400, {"issues": issues})


def ai_service_error(message="AI service is temporarily unavailable", status=503):
    return ApiError(ErrorCodes.AI_SERVICE_ERROR, message, status)


# -------------------- Handlers --------------------
def _show_details():
    return bool(current_app.debug or current_app.testing)


def register_error_handlers(app):
    from models import db

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status >= 500:
            logger.error("❌ %s: %s", error.code, error.message)
        return jsonify(error.to_dict(_show_details())), error.status

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        code = ErrorCodes.NOT_FOUND if error.code == 404 else ErrorCodes.BAD_REQUEST
        body = {"success": False, "error": error.description or error.name, "code": code}
        return jsonify(body), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception("❌ Unexpected error: %s", error)
        body = ApiError(ErrorCodes.INTERNAL_ERROR, "An unexpected error occurred", 500).to_dict()
        return jsonify(body), 500
