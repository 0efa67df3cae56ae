from __future__ import annotations

import logging
import threading
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional

from ..common.datetime_utils import format_header_date, format_iso_date, now_local
from ..common.validators import require_date_in_range, require_non_empty
from ..core.enums import ServiceState
from ..core.exceptions import DuplicateError, ExportError, ValidationError
from ..reports.exporter import CsvExporter
from ..reports.service import AttendanceReportService, render_csv
from ..students.repository import StudentRepository
from .model import Snapshot
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: take a class roll for one selected day.

    Owns the selected date and the last-loaded snapshot. Every mutation goes
    through the store and is followed by a reload, so ``snapshot()`` always
    reflects what is persisted for the selected date.
    """

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        reports: AttendanceReportService | None = None,
        exporter: CsvExporter | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._students = students
        self._attendance = attendance
        self._reports = reports or AttendanceReportService(students, attendance)
        self._exporter = exporter
        self._clock = clock
        self._lock = threading.RLock()

        self._selected_date = clock().date()
        self._snapshot: Optional[Snapshot] = None
        self._state = ServiceState.LOADING

    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def state(self) -> ServiceState:
        return self._state

    def today(self) -> date:
        return self._clock().date()

    def reload(self) -> Snapshot:
        with self._lock:
            self._state = ServiceState.LOADING
            try:
                students = tuple(self._students.list_all())
                records = self._attendance.list_for_date(self._selected_date)
                self._snapshot = Snapshot(
                    selected_date=self._selected_date,
                    students=students,
                    attendance_map={r.student_id: r.is_present for r in records},
                )
            finally:
                self._state = ServiceState.READY
            return self._snapshot

    def snapshot(self) -> Snapshot:
        with self._lock:
            if self._snapshot is None or self._snapshot.selected_date != self._selected_date:
                return self.reload()
            return self._snapshot

    def add_student(self, name: str) -> int:
        name = require_non_empty(name, "student name")

        with self._lock:
            if self._students.get_by_name(name):
                raise DuplicateError("Student already exists")

            student_id = self._students.create_student(name=name, created_at=self._clock())
            logger.info("Added student %r (id=%s)", name, student_id)
            self.reload()
            return student_id

    def remove_student(self, student_id: int) -> None:
        with self._lock:
            self._require_student(student_id)
            self._students.delete_by_id(student_id)
            logger.info("Removed student id=%s", student_id)
            self.reload()

    def mark_attendance(self, student_id: int, is_present: bool = True) -> None:
        with self._lock:
            self._require_student(student_id)
            self._attendance.upsert(
                student_id=student_id,
                attendance_date=self._selected_date,
                is_present=bool(is_present),
            )
            logger.debug(
                "Marked student id=%s %s on %s",
                student_id,
                "present" if is_present else "absent",
                self._selected_date,
            )
            self.reload()

    def select_date(self, value: date) -> Snapshot:
        require_date_in_range(value, today=self.today())
        with self._lock:
            self._selected_date = value
            return self.reload()

    def render_csv(self, report_date: date | None = None) -> str:
        report = self._reports.build_daily_report(report_date or self._selected_date)
        return render_csv(report)

    def export_csv(self, report_date: date | None = None) -> Path:
        if self._exporter is None:
            raise ExportError("Export directory is not configured")

        report = self._reports.build_daily_report(report_date or self._selected_date)
        return self._exporter.write(report)

    def view(self) -> dict:
        """Presentation payload for the current snapshot."""
        snap = self.snapshot()
        return {
            "selected_date": format_iso_date(snap.selected_date),
            "display_date": format_header_date(snap.selected_date),
            "is_today": snap.selected_date == self.today(),
            "is_loading": self._state == ServiceState.LOADING,
            "students": [
                {
                    "id": s.student_id,
                    "name": s.name,
                    "created_at": s.created_at.isoformat(),
                    "is_present": snap.is_present(s.student_id),
                }
                for s in snap.students
            ],
            "attendance_map": {str(k): v for k, v in snap.attendance_map.items()},
            "summary": {"total": snap.total, "present": snap.present, "absent": snap.absent},
        }

    def _require_student(self, student_id: int):
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise ValidationError("Student not found")
        return student
