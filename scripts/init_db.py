from __future__ import annotations

import importlib

from dotenv import load_dotenv

from timekeeping.config import get_settings_module
from timekeeping.database.connection import DBConfig, DatabaseConnection
from timekeeping.database.schema import SCHEMA_STATEMENTS, apply_schema


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(DatabaseConnection(DBConfig.from_mapping(db_config)))
    print(
        "OK: Applied schema -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(SCHEMA_STATEMENTS)})"
    )


if __name__ == "__main__":
    main()
