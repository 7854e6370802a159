"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from compound_interest.app.api.routes import api_bp
from compound_interest.config import Settings, get_global_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_global_settings()

    app = Flask(__name__)
    app.config["ENV"] = settings.app_env
    app.config["TESTING"] = settings.app_env == "testing"

    logging.getLogger("compound_interest").setLevel(settings.log_level)
    app.logger.setLevel(settings.log_level)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
