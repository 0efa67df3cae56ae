from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping

from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one day."""

    attendance_id: int
    student_id: int
    attendance_date: date
    is_present: bool


@dataclass(frozen=True)
class Snapshot:
    """Students plus the attendance map for the selected date.

    A student missing from ``attendance_map`` is unmarked and counts as absent.
    """

    selected_date: date
    students: tuple[Student, ...] = ()
    attendance_map: Mapping[int, bool] = field(default_factory=dict)

    def is_present(self, student_id: int) -> bool:
        return bool(self.attendance_map.get(student_id, False))

    @property
    def total(self) -> int:
        return len(self.students)

    @property
    def present(self) -> int:
        return sum(1 for s in self.students if self.is_present(s.student_id))

    @property
    def absent(self) -> int:
        return self.total - self.present
