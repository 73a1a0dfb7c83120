from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request
from flask_cors import CORS

from .common.responses import fail
from .config import get_settings_module
from .container import Container, build_container
from .database.connection import FirestoreConfig, FirestoreConnection
from .database.record_store import FirestoreRecordStore
from .uploads.imgur_client import ImgurConfig

from .activity.controller import register as register_activity
from .attendance.controller import register as register_attendance
from .lecturers.controller import register as register_lecturers
from .schedules.controller import register as register_schedules
from .settings.controller import register as register_settings
from .stats.controller import register as register_stats
from .subjects.controller import register as register_subjects
from .uploads.controller import register as register_uploads
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

CORS_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"]
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


def _container_from_settings(settings) -> Container:
    conn = FirestoreConnection(
        FirestoreConfig(
            credentials_path=settings.FIREBASE_CREDENTIALS or None,
            project_id=settings.FIREBASE_PROJECT_ID or None,
        )
    )
    return build_container(
        store=FirestoreRecordStore(conn),
        imgur_config=ImgurConfig(
            client_id=settings.IMGUR_CLIENT_ID or None,
            upload_url=settings.IMGUR_UPLOAD_URL,
            timeout_seconds=settings.UPLOAD_TIMEOUT_SECONDS,
        ),
        departments=settings.DEPARTMENTS,
    )


def create_app(container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting with settings=%s", settings_module)

    CORS(
        app,
        resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}},
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=3600,
    )

    @app.before_request
    def answer_preflight():
        # Preflight answers 200 for every path, known or not.
        if request.method == "OPTIONS":
            return "", 200
        return None

    @app.errorhandler(404)
    def not_found(_e):
        return fail("Endpoint not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return fail("Method not allowed", 405)

    container = container or _container_from_settings(settings)

    register_users(app, container)
    register_lecturers(app, container)
    register_subjects(app, container)
    register_schedules(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_stats(app, container)
    register_activity(app, container)
    register_uploads(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
