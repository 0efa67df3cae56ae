from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, student_id: int, attendance_date: date, is_present: bool) -> None:
        """Insert the (student, date) mark or overwrite the existing one."""
        raise NotImplementedError
