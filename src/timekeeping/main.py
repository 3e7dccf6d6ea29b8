from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .common.http_errors import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .database.connection import DBConfig, DatabaseConnection
from .database.schema import apply_schema
from .logging_config import configure_logging
from .overtime.controller import register as register_overtime
from .punches.controller import register as register_punches

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Flask app factory.

    Tests pass a container wired over in-memory repositories; otherwise the
    MySQL adapters are built from the active settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(level=getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "app_starting",
            extra={
                "settings": settings_module,
                "db": f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
            },
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(DatabaseConnection(DBConfig.from_mapping(db_config)))
        container = build_container(
            db_config=db_config,
            lock_timeout=int(getattr(settings, "WEEK_LOCK_TIMEOUT_SECONDS", 10)),
        )

    register_error_handlers(app)
    register_overtime(app, container)
    register_punches(app, container)

    return app
