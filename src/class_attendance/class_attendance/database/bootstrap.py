from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from ..core.exceptions import StorageInitError
from .connection import SQLiteDatabase

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS students (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE,
  created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS attendance (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  student_id INTEGER NOT NULL,
  date TEXT NOT NULL,
  is_present INTEGER NOT NULL,
  FOREIGN KEY (student_id) REFERENCES students (id) ON DELETE CASCADE,
  UNIQUE(student_id, date)
);
CREATE INDEX IF NOT EXISTS idx_attendance_date ON attendance (date);
"""


def apply_schema(db: SQLiteDatabase) -> None:
    """Create tables if they are missing. Safe to call on every startup."""
    try:
        with db.lock:
            conn = db.connection()
            conn.executescript(SCHEMA_SQL)
            conn.commit()
    except sqlite3.Error as exc:
        raise StorageInitError(f"Cannot create schema in {db.path}: {exc}") from exc
    logger.info("Schema ready at %s", db.path)


def list_tables(db: SQLiteDatabase) -> list[str]:
    with db.lock:
        cur = db.connection().execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]


def backup_to(db: SQLiteDatabase, target: str | Path) -> Path:
    """Copy the live database into ``target`` using SQLite's online backup."""
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    with db.lock:
        dest = sqlite3.connect(str(target))
        try:
            db.connection().backup(dest)
        finally:
            dest.close()
    logger.info("Backed up %s to %s", db.path, target)
    return target
