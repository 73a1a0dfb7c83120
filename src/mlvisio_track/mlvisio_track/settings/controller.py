from __future__ import annotations

from flask import Flask

from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/<key>", methods=["GET"], endpoint="settings")
    @handle_errors("Failed to fetch settings")
    def settings(key: str):
        return ok(container.settings_service.get(key))
