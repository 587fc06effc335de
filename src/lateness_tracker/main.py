from __future__ import annotations

import atexit
import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .common.app_logger import get_logger, setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_BCRYPT_ROUNDS, DEFAULT_HOST, DEFAULT_POOL_SIZE, DEFAULT_PORT
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .frontend.controller import register as register_frontend
from .lateness.controller import register as register_lateness
from .students.controller import register as register_students

REPO_ROOT = Path(__file__).resolve().parents[2]


def _resolve_static_dir(value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else REPO_ROOT / path


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    `container` lets tests (or an embedding process) supply prebuilt services;
    otherwise the MySQL-backed container is built from the active settings.
    """
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logger = setup_logging(getattr(settings, "LOG_LEVEL", None))

    static_dir = _resolve_static_dir(getattr(settings, "STATIC_DIR", "dist"))
    app = Flask(__name__, static_folder=None)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", DEFAULT_HOST)
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))
    app.config["STATIC_DIR"] = str(static_dir)

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.debug(
            "settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe()
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            target = DBConfig.from_dict(db_config)
            apply_schema(target)
            logger.debug("schema ready (tables=%s)", len(list_tables(target)))

        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
            bcrypt_rounds=int(getattr(settings, "BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)),
        )

    app.extensions["lateness_tracker"] = container

    register_students(app, container)
    register_lateness(app, container)
    register_frontend(app, static_dir)

    return app


def run() -> None:
    app = create_app()
    container: Container = app.extensions["lateness_tracker"]
    atexit.register(container.close)

    host = app.config["HOST"]
    port = app.config["PORT"]
    logger = get_logger()
    logger.info("Server is awake!")
    logger.info("Local Access: http://localhost:%s", port)
    app.run(host=host, port=port, debug=app.config["DEBUG"], threaded=True)


if __name__ == "__main__":
    run()
