from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Lecturer


class LecturerRepository(Protocol):
    def list_all(self) -> Sequence[Lecturer]:
        raise NotImplementedError

    def get_many(self, lecturer_ids: Iterable[str]) -> dict[str, Lecturer]:
        """Batched lookup by document id, used to enrich subjects and schedules."""

        raise NotImplementedError

    def find_by_name(self, name: str) -> Optional[Lecturer]:
        raise NotImplementedError
