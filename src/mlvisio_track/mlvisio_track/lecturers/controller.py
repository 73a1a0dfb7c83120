from __future__ import annotations

from flask import Flask

from ..common.responses import handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/lecturers", methods=["GET"], endpoint="lecturers")
    @handle_errors("Failed to fetch lecturers")
    def lecturers():
        return ok([lec.to_dict() for lec in container.lecturers_repo.list_all()])
