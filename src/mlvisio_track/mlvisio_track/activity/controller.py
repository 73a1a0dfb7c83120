from __future__ import annotations

from flask import Flask

from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/activity/recent", methods=["GET"], endpoint="recent_activity")
    @handle_errors("Failed to fetch activity")
    def recent():
        return ok(container.activity_service.recent())
