from __future__ import annotations

from flask import Flask, request

from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance")
    @handle_errors("Failed to fetch attendance")
    def attendance():
        day, rows = container.attendance_service.records_for_date(request.args.get("date"))
        return ok(rows, date=day)

    @app.route("/api/attendance/student", methods=["GET"], endpoint="attendance_student")
    @handle_errors("Failed to fetch attendance data")
    def student():
        email = request.args.get("email")
        rows = container.attendance_service.student_history(
            email,
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
        )
        return ok(rows, message=f"Found {len(rows)} attendance records for {email}")

    @app.route("/api/attendance/streak", methods=["GET"], endpoint="attendance_streak")
    @handle_errors("Failed to fetch attendance")
    def streak():
        return ok({"streak": container.attendance_service.streak(request.args.get("email"))})

    @app.route("/api/attendance/report", methods=["GET"], endpoint="attendance_report")
    @handle_errors("Failed to fetch attendance report")
    def report():
        rows = container.attendance_service.report(
            email=request.args.get("email"),
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
            department=request.args.get("department"),
        )
        return ok(rows)

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @handle_errors("Failed to process request")
    def mark():
        payload = request.get_json(silent=True) or {}
        return ok(container.attendance_service.mark(payload), message="Attendance marked successfully")
