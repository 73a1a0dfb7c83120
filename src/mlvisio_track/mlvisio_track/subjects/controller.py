from __future__ import annotations

from flask import Flask, request

from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="subjects")
    @handle_errors("Failed to fetch subjects")
    def subjects():
        return ok(container.subject_service.list_subjects(request.args.get("department") or None))
