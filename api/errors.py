"""
JSON error envelope for everything outside the GraphQL payload.

GraphQL execution errors (NotFoundError, DanglingReferenceError, ...) are
reported inside the GraphQL response; only routing, HTTP and unexpected
failures reach these handlers.
"""
import logging

from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def error_response(error: str, message: str, status: int, details: dict | None = None):
    payload = {"error": error, "message": message, "status": status}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def error_code(err: HTTPException) -> str:
    """Error name as a constant, e.g. UNSUPPORTED_MEDIA_TYPE."""
    return err.name.upper().replace(" ", "_").replace("'", "")


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return error_response(error_code(err), err.description, err.code or 500)

    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.error("Unhandled exception", exc_info=err)
        details = None
        if current_app.debug:
            details = {"type": err.__class__.__name__, "message": str(err)}
        return error_response("INTERNAL_ERROR", "An unexpected error occurred", 500, details=details)
