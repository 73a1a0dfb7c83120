from __future__ import annotations

from flask import Flask

from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats/dashboard", methods=["GET"], endpoint="dashboard_stats")
    @handle_errors("Failed to fetch dashboard stats")
    def dashboard():
        return ok(container.dashboard_service.dashboard())
