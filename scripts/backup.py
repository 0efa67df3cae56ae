"""Backup the attendance database.

Uses SQLite's online backup, so it is safe while the app is running.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.database.bootstrap import backup_to
from src.class_attendance.class_attendance.database.connection import DBConfig, SQLiteDatabase


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_path = Path(settings.DB_CONFIG["path"])
    if not db_path.exists():
        raise SystemExit(f"Database not found: {db_path}. Run scripts/init_db.py first.")

    out_dir = REPO_ROOT / "backups"
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{ts}.db"

    with SQLiteDatabase(DBConfig(path=str(db_path))) as db:
        backup_to(db, out_file)

    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
