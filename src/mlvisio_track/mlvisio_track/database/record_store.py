from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Protocol, Sequence

from google.api_core.exceptions import NotFound
from google.cloud.firestore_v1 import Query
from google.cloud.firestore_v1.base_query import FieldFilter

from ..core.exceptions import NotFoundError
from .connection import FirestoreConnection

# (field, op, value) with op one of "==", ">=", "<=", "in"
Filter = tuple[str, str, Any]


@dataclass(frozen=True)
class StoredDocument:
    """A document id plus its field map, detached from the SDK snapshot."""

    id: str
    data: dict = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


class RecordStore(Protocol):
    """Collection-level access to the document store.

    Collection paths are slash-joined, so sub-collections are addressed as
    ``courses/HNDIT/semesters``.
    """

    def query(
        self,
        collection: str,
        *,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[StoredDocument]:
        raise NotImplementedError

    def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        raise NotImplementedError

    def get_many(self, collection: str, doc_ids: Iterable[str]) -> dict[str, StoredDocument]:
        """Fetch several documents in one round trip; missing ids are omitted."""

        raise NotImplementedError

    def set(self, collection: str, doc_id: str, data: dict) -> None:
        raise NotImplementedError

    def add(self, collection: str, data: dict) -> str:
        raise NotImplementedError

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        """Merge ``data`` into an existing document, NotFoundError otherwise."""

        raise NotImplementedError

    def list_ids(self, collection: str) -> list[str]:
        raise NotImplementedError


class FirestoreRecordStore(RecordStore):
    def __init__(self, conn: FirestoreConnection):
        self._conn = conn

    def _collection(self, collection: str):
        return self._conn.client().collection(collection)

    def query(
        self,
        collection: str,
        *,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[StoredDocument]:
        q = self._collection(collection)
        for field_path, op, value in filters:
            q = q.where(filter=FieldFilter(field_path, op, value))
        if order_by:
            q = q.order_by(order_by, direction=Query.DESCENDING if descending else Query.ASCENDING)
        if limit:
            q = q.limit(int(limit))
        return [StoredDocument(id=snap.id, data=snap.to_dict() or {}) for snap in q.stream()]

    def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        snap = self._collection(collection).document(doc_id).get()
        if not snap.exists:
            return None
        return StoredDocument(id=snap.id, data=snap.to_dict() or {})

    def get_many(self, collection: str, doc_ids: Iterable[str]) -> dict[str, StoredDocument]:
        col = self._collection(collection)
        refs = [col.document(doc_id) for doc_id in dict.fromkeys(doc_ids) if doc_id]
        if not refs:
            return {}
        out: dict[str, StoredDocument] = {}
        for snap in self._conn.client().get_all(refs):
            if snap.exists:
                out[snap.id] = StoredDocument(id=snap.id, data=snap.to_dict() or {})
        return out

    def set(self, collection: str, doc_id: str, data: dict) -> None:
        self._collection(collection).document(doc_id).set(data)

    def add(self, collection: str, data: dict) -> str:
        _, ref = self._collection(collection).add(data)
        return ref.id

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        try:
            self._collection(collection).document(doc_id).update(data)
        except NotFound as e:
            raise NotFoundError(f"{collection}/{doc_id} not found") from e

    def list_ids(self, collection: str) -> list[str]:
        # list_documents also yields parents that only hold sub-collections.
        return [ref.id for ref in self._collection(collection).list_documents()]
