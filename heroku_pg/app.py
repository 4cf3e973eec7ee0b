"""
heroku_pg/app.py
----------------
Application factory for the diagnostics web app.

The app object is created inside a function so that tests and the command
line can inject different configurations (development, production, testing).
"""

from flask import Flask, jsonify
from flask_cors import CORS

from heroku_pg.config import get_config
from heroku_pg.logger import setup_logger
from heroku_pg.routes.diagnostics import diagnostics_bp


def create_app(env: str | None = None, **overrides) -> Flask:
    """Create, configure, and return the Flask application."""

    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.config.update(overrides)

    setup_logger(app.config["LOG_LEVEL"], app.config["LOG_FILE"])

    CORS(app, resources={r"/api/*": {"origins": "*"}}, send_wildcard=True)

    # ------------------------------------------------------------------ #
    # Blueprints                                                           #
    # diagnostics_bp → /api/health, /api/smoke-test                       #
    # ------------------------------------------------------------------ #
    app.register_blueprint(diagnostics_bp, url_prefix="/api")

    # ------------------------------------------------------------------ #
    # Global HTTP error handlers                                           #
    # ------------------------------------------------------------------ #
    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed on this endpoint"}), 405

    return app
