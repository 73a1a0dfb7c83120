from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.validators import is_blank, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .credentials import hash_password, issue_session_token, verify_password
from .model import LoginResult, User
from .repository import UserRepository

INVALID_CREDENTIALS = "Invalid email or password."


def _public(data: dict) -> dict:
    return {k: to_iso(v) for k, v in data.items() if k != "password"}


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str, *, now: Optional[datetime] = None) -> LoginResult:
        if is_blank(email) or is_blank(password):
            raise ValidationError("Email and password are required.")

        user = self._users.get_by_email(email)
        # Unknown email and wrong password share one message.
        if not user or not verify_password(user.password_hash, password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return LoginResult(user=user, token=issue_session_token(now))


class UserService:
    """Use case: manage users (admin screens and profile page)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, *, department: Optional[str] = None, role: Optional[str] = None) -> Sequence[User]:
        return self._users.list_filtered(department=department or None, role=role or None)

    def get_profile(self, identifier: str) -> User:
        """Look up by document id first, then treat the identifier as an email."""
        user = self._users.get_by_id(identifier) or self._users.get_by_email(identifier)
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(self, payload: dict, *, now: Optional[datetime] = None) -> dict:
        email = require_non_empty(payload.get("email"), "Email")
        password = require_non_empty(payload.get("password"), "Password")

        if self._users.get_by_email(email):
            raise ConflictError("User with this email already exists")

        data = dict(payload)
        data["email"] = email
        data["password"] = hash_password(password)
        data.setdefault("department", DEFAULT_DEPARTMENT)
        data.setdefault("role", Role.STUDENT.value)
        data.setdefault("isActive", True)
        data["createdAt"] = now or now_utc()

        user_id = self._users.create(data)
        return {"id": user_id, **_public(data)}

    def update_user(self, user_id: str, fields: dict, *, now: Optional[datetime] = None) -> dict:
        data = dict(fields)
        data.pop("id", None)
        if "password" in data:
            data["password"] = hash_password(require_non_empty(data["password"], "Password"))
        data["updatedAt"] = now or now_utc()

        try:
            self._users.update(user_id, data)
        except NotFoundError:
            raise NotFoundError("User not found")
        return _public(data)

    def delete_user(self, user_id: str, *, now: Optional[datetime] = None) -> None:
        try:
            self._users.soft_delete(user_id, deleted_at=now or now_utc())
        except NotFoundError:
            raise NotFoundError("User not found")
