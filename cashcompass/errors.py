from flask import jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from .extensions import db


def validation_details(exc: ValidationError):
    details = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "body"
        details.append({"field": field, "message": err.get("msg", "Invalid value")})
    return details


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation(exc):
        db.session.rollback()
        return jsonify({"error": "Validation failed", "details": validation_details(exc)}), 400

    @app.errorhandler(HTTPException)
    def handle_http(exc):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        db.session.rollback()
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"error": "Server error."}), 500
