from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, SQLiteDatabase
from .reports.exporter import CsvExporter
from .reports.service import AttendanceReportService
from .students.sqlite_student_repository import SQLiteStudentRepository


@dataclass(frozen=True)
class Container:
    db: SQLiteDatabase

    students_repo: SQLiteStudentRepository
    attendance_repo: SQLiteAttendanceRepository

    report_service: AttendanceReportService
    exporter: CsvExporter
    attendance_service: AttendanceService


def build_container(*, db_config: dict, export_dir: str) -> Container:
    """Open the store, make sure the schema exists and wire the services.

    Raises ``StorageInitError`` when the database cannot be opened or created.
    """

    db = SQLiteDatabase(DBConfig(path=str(db_config["path"]))).open()
    apply_schema(db)

    students_repo = SQLiteStudentRepository(db)
    attendance_repo = SQLiteAttendanceRepository(db)

    report_service = AttendanceReportService(students_repo, attendance_repo)
    exporter = CsvExporter(export_dir)
    attendance_service = AttendanceService(
        students_repo,
        attendance_repo,
        reports=report_service,
        exporter=exporter,
    )

    return Container(
        db=db,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        report_service=report_service,
        exporter=exporter,
        attendance_service=attendance_service,
    )
