from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import LECTURERS
from ..database.record_store import RecordStore
from .model import Lecturer
from .repository import LecturerRepository


class FirestoreLecturerRepository(LecturerRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Lecturer]:
        return [Lecturer.from_document(d) for d in self._store.query(LECTURERS)]

    def get_many(self, lecturer_ids: Iterable[str]) -> dict[str, Lecturer]:
        docs = self._store.get_many(LECTURERS, lecturer_ids)
        return {doc_id: Lecturer.from_document(doc) for doc_id, doc in docs.items()}

    def find_by_name(self, name: str) -> Optional[Lecturer]:
        docs = self._store.query(LECTURERS, filters=[("name", "==", name)], limit=1)
        return Lecturer.from_document(docs[0]) if docs else None
