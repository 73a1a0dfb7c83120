from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for users.

    Note (DIP): the service layer depends on this interface, not on Firestore.
    """

    def list_filtered(self, *, department: Optional[str] = None, role: Optional[str] = None) -> Sequence[User]:
        raise NotImplementedError

    def list_active_students(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str, *, role: Optional[str] = None) -> Optional[User]:
        raise NotImplementedError

    def get_by_registration_numbers(self, registration_numbers: Iterable[str]) -> dict[str, User]:
        """Batched lookup keyed by registration number."""

        raise NotImplementedError

    def create(self, data: dict) -> str:
        raise NotImplementedError

    def update(self, user_id: str, fields: dict) -> None:
        raise NotImplementedError

    def soft_delete(self, user_id: str, *, deleted_at: datetime) -> None:
        raise NotImplementedError
