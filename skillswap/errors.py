from flask import jsonify
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Operation not allowed in the entity's current state."""

    status_code = 400


class StoreError(AppError):
    """Persistence failure; the driver message is passed through as-is."""

    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(err):
        if err.status_code >= 500:
            app.logger.error("Store error: %s", err.message)
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(400)
    def bad_request(_err):
        return jsonify({"error": "Bad request"}), 400

    @app.errorhandler(404)
    def not_found(_err):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_err):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(429)
    def too_many_requests(_err):
        return jsonify({"error": "Too many requests"}), 429

    @app.errorhandler(Exception)
    def server_error(err):
        if isinstance(err, HTTPException):
            return jsonify({"error": err.description}), err.code
        app.logger.exception("Internal server error")
        return jsonify({"error": "Internal server error"}), 500
