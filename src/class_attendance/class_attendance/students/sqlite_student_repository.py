from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import SQLiteDatabase
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["id"]),
        name=r["name"],
        created_at=datetime.fromisoformat(r["created_at"]),
    )


class SQLiteStudentRepository(StudentRepository):
    def __init__(self, db: SQLiteDatabase):
        self._db = db

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._db) as (_, cur):
            cur.execute("SELECT id, name, created_at FROM students ORDER BY name ASC")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._db) as (_, cur):
            cur.execute("SELECT id, name, created_at FROM students WHERE id=?", (int(student_id),))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def get_by_name(self, name: str) -> Optional[Student]:
        with db_cursor(self._db) as (_, cur):
            cur.execute("SELECT id, name, created_at FROM students WHERE name=?", (name,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def create_student(self, *, name: str, created_at: datetime) -> int:
        with db_cursor(self._db) as (_, cur):
            cur.execute(
                "INSERT INTO students(name, created_at) VALUES(?, ?)",
                (name, created_at.isoformat()),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._db) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE student_id=?", (int(student_id),))
            cur.execute("DELETE FROM students WHERE id=?", (int(student_id),))
            return cur.rowcount > 0
