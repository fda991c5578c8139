# donation_admin/__init__.py
from __future__ import annotations

import logging
import os
from typing import Any, Optional

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .extensions import cors, db, jwt, migrate


# --- Config ------------------------------------------------------------------
def _get_allowed_origins(app: Flask) -> list[str]:
    """Allowed CORS origins: local dev servers plus CORS_ALLOWED_ORIGINS."""
    default = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]
    # Support comma-separated list in env
    extra = app.config.get("CORS_ALLOWED_ORIGINS", "")
    extra_list = [o.strip() for o in extra.split(",") if o.strip()]
    return sorted(set(default + extra_list))


def _load_config(app: Flask, config_object: Optional[str | Any]) -> None:
    if config_object is None:
        config_object = os.getenv("CONFIG_CLASS", "donation_admin.config.Config")

    if isinstance(config_object, str):
        # load "package.module.ClassName"
        module, _, cls = config_object.rpartition(".")
        config_object = getattr(__import__(module, fromlist=[cls]), cls)

    app.config.from_object(config_object)
    if hasattr(config_object, "init_app"):
        config_object.init_app(app)


def _configure_logging(app: Flask) -> None:
    """JSON logs to stdout."""
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    app.logger.setLevel(level)
    root = logging.getLogger()
    root.setLevel(level)

    # avoid duplicate handlers in reloaders
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='{"ts":"%(asctime)s","level":"%(levelname)s","msg":"%(message)s","name":"%(name)s"}',
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)


def _configure_cors(app: Flask) -> None:
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": _get_allowed_origins(app)}},
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Content-Disposition"],
        max_age=86400,
    )


def _configure_proxy(app: Flask) -> None:
    """Respect X-Forwarded-* from the hosting proxy."""
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)  # type: ignore


def _init_extensions(app: Flask) -> None:
    from .security import init_security

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    init_security(app, jwt)


def _register_blueprints(app: Flask) -> None:
    from .routes import BLUEPRINTS

    for bp in BLUEPRINTS:
        app.register_blueprint(bp)
        app.logger.debug("Registered blueprint %s at %s", bp.name, bp.url_prefix or "")


# --- Application Factory ------------------------------------------------------
def create_app(config_object: Optional[str | Any] = None) -> Flask:
    """
    Standard Flask application factory.

    `config_object` may be:
      - a config class
      - dotted path to a config class (e.g., "donation_admin.config.ProductionConfig")
      - None (then CONFIG_CLASS env, defaulting to donation_admin.config.Config)
    """
    from . import models  # noqa: F401  registers tables on db.metadata
    from .cli import register_cli
    from .errors import register_error_handlers

    app = Flask(__name__, instance_relative_config=True)
    # relative sqlite:/// URLs resolve inside the instance folder
    os.makedirs(app.instance_path, exist_ok=True)
    _load_config(app, config_object)
    app.json.sort_keys = False

    _configure_logging(app)
    _configure_proxy(app)
    _configure_cors(app)

    _init_extensions(app)
    _register_blueprints(app)
    register_error_handlers(app)
    register_cli(app)

    app.logger.info(
        "donation-admin ready (%d allow-listed users)", len(app.config["ACCESS_CREDENTIALS"])
    )
    return app
