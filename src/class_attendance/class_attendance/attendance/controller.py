from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..container import Container
from ..core.constants import EXPORT_FILENAME_TEMPLATE
from ..core.exceptions import (
    ConstraintError,
    DuplicateError,
    ExportError,
    ValidationError,
)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    def _parse_date(value: object) -> date:
        if not value:
            raise ValidationError("Missing date")
        if not isinstance(value, str):
            raise ValidationError("Date must be a YYYY-MM-DD string")
        try:
            return parse_iso_date(value)
        except ValueError as e:
            raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from e

    def _payload() -> dict:
        body = request.get_json(silent=True)
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise ValidationError("Expected a JSON object")
        return body

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(DuplicateError)
    def handle_duplicate(e: DuplicateError):
        return _error(str(e), 409)

    @app.errorhandler(ConstraintError)
    def handle_constraint(e: ConstraintError):
        app.logger.warning("Constraint violation: %s", e)
        return _error("The change conflicts with existing data", 409)

    @app.errorhandler(ExportError)
    def handle_export(e: ExportError):
        app.logger.error("Export failed: %s", e.cause or e)
        return _error(str(e), 500)

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return _error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return _error(f"Internal error: {e}", 500)
        return _error("Internal error", 500)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_view")
    def attendance_view():
        date_s = request.args.get("date")
        # Same as picking a date in the UI: the selection sticks for later calls.
        if date_s:
            service.select_date(_parse_date(date_s))
        return jsonify(service.view())

    @app.route("/api/attendance/date", methods=["POST"], endpoint="attendance_select_date")
    def attendance_select_date():
        service.select_date(_parse_date(_payload().get("date")))
        return jsonify(service.view())

    @app.route("/api/students", methods=["POST"], endpoint="students_add")
    def students_add():
        name = _payload().get("name") or ""
        student_id = service.add_student(str(name))
        body = service.view()
        body["student_id"] = student_id
        return jsonify(body), 201

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_remove")
    def students_remove(student_id: int):
        service.remove_student(student_id)
        return jsonify(service.view())

    @app.route("/api/students/<int:student_id>/attendance", methods=["POST"], endpoint="students_mark")
    def students_mark(student_id: int):
        is_present = _payload().get("is_present", True)
        if not isinstance(is_present, bool):
            raise ValidationError("is_present must be true or false")
        service.mark_attendance(student_id, is_present)
        return jsonify(service.view())

    @app.route("/api/attendance/export", methods=["POST"], endpoint="attendance_export")
    def attendance_export():
        date_s = _payload().get("date")
        report_date = _parse_date(date_s) if date_s else None
        path = service.export_csv(report_date)
        return jsonify({"path": str(path)})

    @app.route("/api/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    def attendance_report_csv():
        date_s = request.args.get("date")
        report_date = _parse_date(date_s) if date_s else service.selected_date

        csv_bytes = service.render_csv(report_date).encode("utf-8-sig")
        filename = EXPORT_FILENAME_TEMPLATE.format(date=format_iso_date(report_date))
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
