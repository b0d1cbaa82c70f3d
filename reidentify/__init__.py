"""Flask application factory for the ReIDentify backend."""

from __future__ import annotations

import logging
import os
from typing import Optional

from flask import Flask, jsonify, request

from .config import Config
from .extensions import db
from .store import DocumentStore

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL") or "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    app.logger.setLevel(level)
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        path = os.path.abspath(log_file)
        already = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path
            for h in app.logger.handlers
        )
        if not already:
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            app.logger.addHandler(file_handler)


def _register_blueprints(app: Flask) -> None:
    """Register all API blueprints used by the project."""
    from .faculty import bp as faculty_bp
    from .records import bp as records_bp
    from .requests import bp as requests_bp
    from .system import bp as system_bp

    app.register_blueprint(requests_bp, url_prefix="/api/requests")
    app.register_blueprint(records_bp, url_prefix="/api")
    app.register_blueprint(faculty_bp, url_prefix="/api")
    app.register_blueprint(system_bp, url_prefix="/api")


def _register_commands(app: Flask) -> None:
    from .commands import import_faculty_command, seed_pending_command

    app.cli.add_command(import_faculty_command)
    app.cli.add_command(seed_pending_command)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def _not_found(err):
        if request.path.startswith("/api/"):
            return jsonify(message="Not Found"), 404
        return err

    @app.errorhandler(405)
    def _method_not_allowed(err):
        if request.path.startswith("/api/"):
            return jsonify(message="Method Not Allowed"), 405
        return err


def _apply_cors(app: Flask) -> None:
    """Allow cross-origin calls from the configured dashboard origins only."""
    allowed = set(app.config.get("CORS_ORIGINS") or [])
    methods = ", ".join(app.config.get("CORS_METHODS") or [])
    max_age = str(app.config.get("CORS_MAX_AGE", 600))

    @app.before_request
    def _cors_preflight():
        if request.method != "OPTIONS":
            return None
        if request.headers.get("Origin") not in allowed:
            return None
        resp = app.make_response(("", 204))
        resp.headers["Access-Control-Allow-Methods"] = methods
        resp.headers["Access-Control-Max-Age"] = max_age
        requested = request.headers.get("Access-Control-Request-Headers")
        if requested:
            resp.headers["Access-Control-Allow-Headers"] = requested
        return resp

    @app.after_request
    def _cors_headers(resp):
        origin = request.headers.get("Origin")
        if origin and origin in allowed:
            resp.headers["Access-Control-Allow-Origin"] = origin
            resp.headers.add("Vary", "Origin")
        return resp


def _apply_security_headers(app: Flask) -> None:
    @app.after_request
    def _set_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "same-origin")
        return resp


def create_app(config_class: type[Config] = Config, store: Optional[DocumentStore] = None) -> Flask:
    """Build the application.

    ``store`` replaces the default SQLAlchemy-backed :class:`DocumentStore`,
    which is how tests inject a store that fails on purpose.
    """
    from .services.requests_service import UNKNOWN_STATUS_POLICIES

    app = Flask(__name__)
    app.config.from_object(config_class)

    policy = app.config.get("UNKNOWN_STATUS_POLICY")
    if policy not in UNKNOWN_STATUS_POLICIES:
        raise ValueError(
            f"UNKNOWN_STATUS_POLICY must be one of {', '.join(UNKNOWN_STATUS_POLICIES)}, got {policy!r}"
        )

    _configure_logging(app)

    db.init_app(app)
    with app.app_context():
        from . import models  # noqa: F401
        db.create_all()
        app.logger.info(
            "Document store connected: %s",
            db.engine.url.render_as_string(hide_password=True),
        )

    app.extensions["document_store"] = store if store is not None else DocumentStore()

    _register_blueprints(app)
    _register_commands(app)
    _register_error_handlers(app)
    _apply_cors(app)
    _apply_security_headers(app)
    return app
