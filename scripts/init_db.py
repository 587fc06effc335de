from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from lateness_tracker.common.app_logger import setup_logging
from lateness_tracker.database.bootstrap import DEFAULT_SCHEMA_PATH, apply_schema, list_tables
from lateness_tracker.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logger = setup_logging(getattr(settings, "LOG_LEVEL", None))
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(target, schema_path=DEFAULT_SCHEMA_PATH)
    tables = list_tables(target)
    logger.info("OK: applied schema.sql -> %s (tables=%s)", target.describe(), len(tables))


if __name__ == "__main__":
    main()
