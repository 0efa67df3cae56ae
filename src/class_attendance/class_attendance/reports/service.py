from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_report_date
from ..core.enums import AttendanceStatus
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class DailyReport:
    report_date: date
    rows: list[dict]
    total: int
    present: int
    absent: int


class AttendanceReportService:
    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def build_daily_report(self, report_date: date) -> DailyReport:
        students = self._students.list_all()
        marks = {r.student_id: r.is_present for r in self._attendance.list_for_date(report_date)}

        rows: list[dict] = []
        present = 0
        for s in students:
            is_present = marks.get(s.student_id, False)
            if is_present:
                present += 1
            status = AttendanceStatus.PRESENT if is_present else AttendanceStatus.ABSENT
            rows.append({"name": s.name, "status": status.value})

        total = len(rows)
        return DailyReport(
            report_date=report_date,
            rows=rows,
            total=total,
            present=present,
            absent=total - present,
        )


def render_csv(report: DailyReport) -> str:
    """Render a daily report in the exported CSV layout.

    The title line is written as-is (the date contains a comma); every other
    line goes through the csv writer so names with commas stay one field.
    """

    out = io.StringIO()
    out.write(f"Attendance Report - {format_report_date(report.report_date)}\n\n")

    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(["Name", "Status"])
    for row in report.rows:
        writer.writerow([row["name"], row["status"]])

    writer.writerow([])
    writer.writerow(["Summary"])
    writer.writerow(["Total Students", report.total])
    writer.writerow(["Present", report.present])
    writer.writerow(["Absent", report.absent])
    return out.getvalue()
