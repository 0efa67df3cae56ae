from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance.service import AttendanceService
from src.class_attendance.class_attendance.attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from src.class_attendance.class_attendance.core.exceptions import ExportError
from src.class_attendance.class_attendance.reports.exporter import CsvExporter
from src.class_attendance.class_attendance.reports.service import AttendanceReportService, DailyReport, render_csv
from src.class_attendance.class_attendance.students.sqlite_student_repository import SQLiteStudentRepository

DAY = date(2024, 1, 10)


@pytest.fixture
def repos(memory_db):
    return SQLiteStudentRepository(memory_db), SQLiteAttendanceRepository(memory_db)


@pytest.fixture
def svc(repos, tmp_path, fixed_now):
    students, attendance = repos
    return AttendanceService(
        students,
        attendance,
        exporter=CsvExporter(tmp_path / "exports"),
        clock=lambda: fixed_now,
    )


def test_alice_present_bob_absent_scenario(svc, repos):
    _, attendance = repos
    alice = svc.add_student("Alice")
    svc.add_student("Bob")
    svc.select_date(DAY)
    svc.mark_attendance(alice, True)

    assert {r.student_id: r.is_present for r in attendance.list_for_date(DAY)} == {alice: True}
    assert svc.render_csv(DAY) == (
        "Attendance Report - January 10, 2024\n"
        "\n"
        "Name,Status\n"
        "Alice,Present\n"
        "Bob,Absent\n"
        "\n"
        "Summary\n"
        "Total Students,2\n"
        "Present,1\n"
        "Absent,1\n"
    )


def test_summary_counts_add_up_for_every_date(svc, repos):
    students, attendance = repos
    ids = [svc.add_student(name) for name in ["Ann", "Ben", "Cat", "Dan"]]
    marks = {
        date(2024, 1, 8): {ids[0]: True, ids[1]: False},
        date(2024, 1, 9): {ids[0]: True, ids[1]: True, ids[2]: True, ids[3]: True},
        date(2024, 1, 10): {},
    }
    for d, day_marks in marks.items():
        svc.select_date(d)
        for student_id, is_present in day_marks.items():
            svc.mark_attendance(student_id, is_present)

    service = AttendanceReportService(students, attendance)
    for d, day_marks in marks.items():
        report = service.build_daily_report(d)
        assert report.present + report.absent == report.total == 4
        assert report.present == sum(day_marks.values())


def test_names_with_commas_are_quoted():
    report = DailyReport(
        report_date=DAY,
        rows=[{"name": "Doe, Jane", "status": "Present"}],
        total=1,
        present=1,
        absent=0,
    )

    lines = render_csv(report).splitlines()

    assert lines[0] == "Attendance Report - January 10, 2024"
    assert lines[3] == '"Doe, Jane",Present'


def test_export_writes_dated_file(svc, tmp_path):
    alice = svc.add_student("Alice")
    svc.select_date(DAY)
    svc.mark_attendance(alice, True)

    path = svc.export_csv(DAY)

    assert path == tmp_path / "exports" / "attendance_2024-01-10.csv"
    content = path.read_text(encoding="utf-8")
    assert "Alice,Present\n" in content
    assert content.endswith("Present,1\nAbsent,0\n")


def test_export_failure_keeps_state(repos, tmp_path, fixed_now):
    students, attendance = repos
    blocker = tmp_path / "exports"
    blocker.write_text("not a directory")
    svc = AttendanceService(students, attendance, exporter=CsvExporter(blocker), clock=lambda: fixed_now)
    svc.add_student("Alice")
    before = svc.snapshot()

    with pytest.raises(ExportError) as excinfo:
        svc.export_csv(DAY)

    assert isinstance(excinfo.value.cause, OSError)
    assert svc.snapshot() == before


def test_report_for_empty_roster():
    report = DailyReport(report_date=DAY, rows=[], total=0, present=0, absent=0)

    assert render_csv(report).endswith("Name,Status\n\nSummary\nTotal Students,0\nPresent,0\nAbsent,0\n")


def test_created_at_comes_from_clock(svc, repos, fixed_now):
    students, _ = repos
    svc.add_student("Alice")

    assert students.get_by_name("Alice").created_at == fixed_now
