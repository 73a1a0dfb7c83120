from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", methods=["GET"], endpoint="schedules")
    @handle_errors("Failed to fetch schedule")
    def schedules():
        return ok(container.schedule_service.list_all())

    @app.route("/api/schedule/today", methods=["GET"], endpoint="schedule_today")
    @handle_errors("Failed to fetch today's schedule")
    def today():
        day, rows = container.schedule_service.today()
        return ok(rows, day=day)

    @app.route("/api/schedule/week", methods=["GET"], endpoint="schedule_week")
    @handle_errors("Failed to fetch schedule")
    def week():
        return ok(
            container.schedule_service.week(
                department=request.args.get("department"),
                year=request.args.get("year"),
            )
        )

    @app.route("/api/schedule/create", methods=["POST"], endpoint="schedule_create")
    @handle_errors("Failed to process request")
    def create():
        payload = request.get_json(silent=True) or {}
        created = container.schedule_service.create(payload)
        return ok(created, message="Schedule created successfully")

    @app.route("/api/schedule/update/<schedule_id>", methods=["PUT"], endpoint="schedule_update")
    @handle_errors("Failed to process request")
    def update(schedule_id: str):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return fail("Request body must be a JSON object", 400)
        container.schedule_service.update(schedule_id, payload)
        return ok(message="Schedule updated successfully")

    @app.route("/api/schedule/delete/<schedule_id>", methods=["DELETE"], endpoint="schedule_delete")
    @handle_errors("Failed to process request")
    def delete(schedule_id: str):
        container.schedule_service.delete(schedule_id)
        return ok(message="Schedule deleted successfully")
