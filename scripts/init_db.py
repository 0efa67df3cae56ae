from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.database.bootstrap import apply_schema, list_tables
from src.class_attendance.class_attendance.database.connection import DBConfig, SQLiteDatabase


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_path = str(settings.DB_CONFIG["path"])

    with SQLiteDatabase(DBConfig(path=db_path)) as db:
        apply_schema(db)
        tables = list_tables(db)

    print(f"OK: Applied schema -> {db_path} (tables={len(tables)})")


if __name__ == "__main__":
    main()
