# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from authgate.infrastructure.container import Container
from authgate.infrastructure.db import init_db
from authgate.shared.config import AppConfig
from authgate.shared.errors import register_error_handler
from authgate.shared.logging import logger
from authgate.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig, *, container: Container | None = None) -> Flask:
    container = container or Container(config)
    init_db(container.engine)

    app = Flask(__name__)
    register_error_handler(app, debug_mode=config.debug_logging)
    configure_request_logging(
        app,
        debug_mode=config.debug_logging,
        metrics_enabled=config.metrics_enabled,
    )

    cors_options = {"origins": config.allowed_origins}
    if "*" in config.allowed_origins:
        # flask-cors echoes the request Origin unless told to send the wildcard.
        cors_options["send_wildcard"] = True
    CORS(app, resources={r"/api/*": cors_options})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.profile_controller.as_blueprint())

    logger.info("Flask app initialized")
    return app
