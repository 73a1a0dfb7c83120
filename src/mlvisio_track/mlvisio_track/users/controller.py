from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import fail, handle_errors, ok
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @handle_errors("Server error")
    def login():
        payload = request.get_json(silent=True) or {}
        result = container.auth_service.authenticate(payload.get("email"), payload.get("password"))
        logger.info("Login successful for %s", result.user.email)
        return ok(result.to_dict(), message="Login successful.")

    @app.route("/api/users", methods=["GET"], endpoint="users_list_default")
    @app.route("/api/users/list", methods=["GET"], endpoint="users_list")
    @handle_errors("Failed to fetch users")
    def list_users():
        users = container.user_service.list_users(
            department=request.args.get("department"),
            role=request.args.get("role"),
        )
        return ok([u.to_list_view() for u in users])

    @app.route("/api/users/profile/<identifier>", methods=["GET"], endpoint="user_profile")
    @handle_errors("Failed to fetch users")
    def profile(identifier: str):
        return ok(container.user_service.get_profile(identifier).to_profile())

    @app.route("/api/users/create", methods=["POST"], endpoint="user_create")
    @handle_errors("Failed to process request")
    def create_user():
        payload = request.get_json(silent=True) or {}
        created = container.user_service.create_user(payload)
        return ok(created, message="User created successfully")

    @app.route("/api/users/update/<user_id>", methods=["PUT"], endpoint="user_update")
    @handle_errors("Failed to process request")
    def update_user(user_id: str):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return fail("Request body must be a JSON object", 400)
        updated = container.user_service.update_user(user_id, payload)
        return ok(updated, message="User updated successfully")

    @app.route("/api/users/delete/<user_id>", methods=["DELETE"], endpoint="user_delete")
    @handle_errors("Failed to process request")
    def delete_user(user_id: str):
        container.user_service.delete_user(user_id)
        return ok(message="User deleted successfully")
