from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.exceptions import ConstraintError
from .connection import SQLiteDatabase


@contextmanager
def db_cursor(db: SQLiteDatabase) -> Iterator[Tuple[sqlite3.Connection, sqlite3.Cursor]]:
    """Run the enclosed statements as one transaction.

    Commits on success, rolls back on any exception. Integrity violations are
    re-raised as ``ConstraintError``.
    """

    with db.lock:
        conn = db.connection()
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise ConstraintError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()


def fetchone(cur: sqlite3.Cursor) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur: sqlite3.Cursor) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]
