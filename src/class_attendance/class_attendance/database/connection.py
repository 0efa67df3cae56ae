from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.exceptions import StorageInitError

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


@dataclass(frozen=True)
class DBConfig:
    path: str


class SQLiteDatabase:
    """Process-wide connection to the embedded attendance database.

    One connection is opened at startup and shared by every repository; use of it
    is serialized through ``lock``. Call ``close()`` (or use the instance as a
    context manager) to release it.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._config.path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> "SQLiteDatabase":
        if self._conn is not None:
            return self

        path = self._config.path
        try:
            if path != MEMORY_PATH:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
        except (sqlite3.Error, OSError) as exc:
            raise StorageInitError(f"Cannot open database at {path}: {exc}") from exc

        self._conn = conn
        logger.debug("Opened database %s", path)
        return self

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self.open()
        return self._conn

    def close(self) -> None:
        with self.lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.debug("Closed database %s", self._config.path)

    def __enter__(self) -> "SQLiteDatabase":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
