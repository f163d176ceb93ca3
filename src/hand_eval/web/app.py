"""Flask application for the hand evaluation API."""

import logging

from flask import Flask, jsonify

from hand_eval import __version__
from hand_eval.config import Config, get_config
from .routes import hands_bp


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    # Register blueprints
    app.register_blueprint(hands_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"success": False, "error": "Method not allowed"}), 405

    @app.errorhandler(413)
    def request_too_large(e):
        return jsonify({"success": False, "error": "Request body too large"}), 413

    @app.route("/health")
    def health():
        """Liveness check."""
        return jsonify({"status": "ok", "version": __version__})

    return app


def setup_logging(config_class: type[Config]) -> None:
    """Set up logging for the application."""
    logging.basicConfig(
        level=config_class.LOG_LEVEL,
        format=config_class.LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
