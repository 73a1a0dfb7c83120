from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.constants import USERS
from ..core.enums import Role
from ..database.record_store import RecordStore
from .model import User
from .repository import UserRepository

# Firestore caps "in" filters, so batched lookups are chunked.
_IN_CHUNK = 30


class FirestoreUserRepository(UserRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_filtered(self, *, department: Optional[str] = None, role: Optional[str] = None) -> Sequence[User]:
        filters = []
        if department:
            filters.append(("department", "==", department))
        if role:
            filters.append(("role", "==", role))
        return [User.from_document(d) for d in self._store.query(USERS, filters=filters)]

    def list_active_students(self) -> Sequence[User]:
        docs = self._store.query(
            USERS,
            filters=[("role", "==", Role.STUDENT.value), ("isActive", "==", True)],
        )
        return [User.from_document(d) for d in docs]

    def get_by_id(self, user_id: str) -> Optional[User]:
        doc = self._store.get(USERS, user_id)
        return User.from_document(doc) if doc else None

    def get_by_email(self, email: str, *, role: Optional[str] = None) -> Optional[User]:
        filters = [("email", "==", email)]
        if role:
            filters.append(("role", "==", role))
        docs = self._store.query(USERS, filters=filters, limit=1)
        return User.from_document(docs[0]) if docs else None

    def get_by_registration_numbers(self, registration_numbers: Iterable[str]) -> dict[str, User]:
        wanted = [r for r in dict.fromkeys(registration_numbers) if r]
        out: dict[str, User] = {}
        for i in range(0, len(wanted), _IN_CHUNK):
            chunk = wanted[i : i + _IN_CHUNK]
            for doc in self._store.query(USERS, filters=[("registrationNumber", "in", chunk)]):
                user = User.from_document(doc)
                out.setdefault(user.registration_number, user)
        return out

    def create(self, data: dict) -> str:
        return self._store.add(USERS, data)

    def update(self, user_id: str, fields: dict) -> None:
        self._store.update(USERS, user_id, fields)

    def soft_delete(self, user_id: str, *, deleted_at: datetime) -> None:
        self._store.update(USERS, user_id, {"isActive": False, "deletedAt": deleted_at})
