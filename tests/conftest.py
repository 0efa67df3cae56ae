from __future__ import annotations

from datetime import datetime

import pytest

from src.class_attendance.class_attendance.database.bootstrap import apply_schema
from src.class_attendance.class_attendance.database.connection import DBConfig, SQLiteDatabase


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 0, 0)


@pytest.fixture
def memory_db():
    db = SQLiteDatabase(DBConfig(path=":memory:")).open()
    apply_schema(db)
    yield db
    db.close()
