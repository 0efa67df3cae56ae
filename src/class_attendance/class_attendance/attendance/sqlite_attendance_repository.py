from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..database.connection import SQLiteDatabase
from ..database.sqlite_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, db: SQLiteDatabase):
        self._db = db

    def list_for_date(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._db) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, date, is_present
                FROM attendance
                WHERE date=?
                ORDER BY student_id ASC
                """,
                (format_iso_date(attendance_date),),
            )
            return [
                AttendanceRecord(
                    attendance_id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    attendance_date=parse_iso_date(r["date"]),
                    is_present=bool(r["is_present"]),
                )
                for r in fetchall(cur)
            ]

    def upsert(self, *, student_id: int, attendance_date: date, is_present: bool) -> None:
        with db_cursor(self._db) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, date, is_present)
                VALUES(?, ?, ?)
                ON CONFLICT(student_id, date) DO UPDATE SET is_present=excluded.is_present
                """,
                (int(student_id), format_iso_date(attendance_date), 1 if is_present else 0),
            )
