from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import to_iso
from ..core.enums import Role, StudyMode
from ..database.record_store import StoredDocument

# Optional profile fields that are always present (possibly null) in a profile.
PROFILE_FIELDS = ("birthDate", "profilePicture", "year", "type", "adminLevel")


@dataclass(frozen=True)
class User:
    """Domain entity: a student or admin account.

    Note: Plain data object, it holds no database access code.
    """

    user_id: str
    email: Optional[str]
    name: Optional[str]
    registration_number: Optional[str]
    department: Optional[str]
    role: Role
    password_hash: Optional[str] = None
    birth_date: Optional[str] = None
    year: Optional[str] = None
    study_type: Optional[str] = None
    admin_level: Optional[str] = None
    profile_picture: Optional[str] = None
    vertex_label: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    raw: Optional[dict] = None

    @property
    def study_mode(self) -> StudyMode:
        return StudyMode.parse(self.study_type)

    @classmethod
    def from_document(cls, doc: StoredDocument) -> "User":
        d = doc.data
        try:
            role = Role(d.get("role") or Role.STUDENT.value)
        except ValueError:
            role = Role.STUDENT
        return cls(
            user_id=doc.id,
            email=d.get("email"),
            name=d.get("name"),
            registration_number=d.get("registrationNumber"),
            department=d.get("department"),
            role=role,
            password_hash=d.get("password"),
            birth_date=d.get("birthDate"),
            year=d.get("year"),
            study_type=d.get("type"),
            admin_level=d.get("adminLevel"),
            profile_picture=d.get("profilePicture"),
            vertex_label=d.get("vertexLabel"),
            is_active=bool(d.get("isActive", True)),
            created_at=d.get("createdAt"),
            raw=dict(d),
        )

    def to_login_view(self) -> dict[str, Any]:
        return {
            "id": self.user_id,
            "email": self.email,
            "name": self.name,
            "registrationNumber": self.registration_number,
            "department": self.department,
            "birthDate": self.birth_date,
            "year": self.year,
            "type": self.study_type,
            "role": self.role.value,
            "joinDate": to_iso(self.created_at),
        }

    def to_list_view(self) -> dict[str, Any]:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "registrationNumber": self.registration_number,
            "department": self.department,
            "birthDate": self.birth_date,
            "year": self.year,
            "type": self.study_type,
            "adminLevel": self.admin_level,
            "profilePicture": self.profile_picture,
            "role": self.role.value,
            "isActive": self.is_active,
            "createdAt": to_iso(self.created_at),
        }

    def to_profile(self) -> dict[str, Any]:
        """Every stored field except the password hash."""
        profile = {k: to_iso(v) for k, v in (self.raw or {}).items() if k != "password"}
        profile["id"] = self.user_id
        for key in PROFILE_FIELDS:
            profile.setdefault(key, None)
        return profile


@dataclass(frozen=True)
class LoginResult:
    user: User
    token: str

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_login_view(), "token": self.token}
