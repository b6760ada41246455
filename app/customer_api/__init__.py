import logging
import uuid

from flask import Flask, g, jsonify, request
from dotenv import load_dotenv

from app.customer_api.config import load_config
from app.customer_api.db import check_connection, create_schema, init_db, teardown_db_session
from app.customer_api.routes import bp as routes_bp
from app.customer_api.modules.customers.api import bp as customers_bp

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def _error_body(status_code: int, message: str):
    return jsonify({"statusCode": status_code, "message": message, "isError": True}), status_code


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    app.json.sort_keys = False
    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if str(app.config["DATABASE_URL"]).startswith("sqlite"):
            raise RuntimeError("DATABASE_URL must point at a server database in production (not sqlite).")

    init_db(app)

    if check_connection(app) and app.config.get("AUTO_CREATE_SCHEMA"):
        create_schema(app)

    app.register_blueprint(routes_bp)
    app.register_blueprint(customers_bp)

    @app.before_request
    def _log_request():
        g.request_id = uuid.uuid4().hex
        app.logger.info("%s %s request_id=%s", request.method, request.path, g.request_id)

    @app.after_request
    def _cors_headers(response):
        for key, value in CORS_HEADERS.items():
            response.headers.setdefault(key, value)
        return response

    app.teardown_appcontext(teardown_db_session)

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return _error_body(404, "Endpoint not found.")

    @app.errorhandler(405)
    def _err_405(e):  # type: ignore[no-redef]
        # Unknown method/path combinations are reported like unknown paths.
        return _error_body(404, "Endpoint not found.")

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return _error_body(500, "Internal server error.")

    app.logger.info("create_app() complete; app ready to serve")

    return app
