"""
TailorBook Web Application Factory

Flask app that serves the customer-manager JSON endpoint to the shop UI.
"""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from tailorbook.core.errors import ErrorKind, TailorBookError
from tailorbook.core.logging import get_logger

_CORS_METHODS = "POST, GET, OPTIONS"
_CORS_HEADERS = "Content-Type, Authorization"

_HTTP_ERROR_KINDS = {
    404: ErrorKind.NOT_FOUND,
    405: ErrorKind.METHOD_NOT_ALLOWED,
}

logger = get_logger("tailorbook.api")


def create_app() -> Flask:
    """Create and configure the TailorBook Flask application."""
    app = Flask(__name__)

    from tailorbook.core.config import get_config

    config = get_config()
    api_cfg = config.get("api", {})

    # Keep customer names readable in non-Latin scripts
    app.json.ensure_ascii = False

    # ── CORS + security headers ──────────────────────────────────────────
    cors_origin = api_cfg.get("cors_origin", "*")

    @app.after_request
    def set_response_headers(response):
        response.headers["Access-Control-Allow-Origin"] = cors_origin
        response.headers["Access-Control-Allow-Methods"] = _CORS_METHODS
        response.headers["Access-Control-Allow-Headers"] = _CORS_HEADERS
        response.headers["X-Content-Type-Options"] = "nosniff"
        return response

    # ── JSON bodies for routing and unexpected errors ────────────────────
    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        kind = _HTTP_ERROR_KINDS.get(exc.code)
        message = kind.default_message if kind else exc.name
        response = jsonify({"success": False, "message": message})
        response.status_code = exc.code
        valid_methods = getattr(exc, "valid_methods", None)
        if valid_methods:
            response.headers["Allow"] = ", ".join(valid_methods)
        return response

    @app.errorhandler(Exception)
    def unexpected_error(exc: Exception):
        logger.error("Unhandled exception: %s", exc, exc_info=exc)
        err = TailorBookError(ErrorKind.STORE_FAILURE)
        return jsonify(err.to_dict()), err.status

    # ── Register blueprints ──────────────────────────────────────────────
    from tailorbook.api.customer_manager import bp as customer_manager_bp

    endpoint = api_cfg.get("endpoint", "/api/customer-manager")
    app.register_blueprint(customer_manager_bp, url_prefix=endpoint)

    return app
