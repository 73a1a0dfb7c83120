from __future__ import annotations

import copy
import itertools
from datetime import date, datetime, timezone
from typing import Any, Callable, Iterable, Optional, Sequence
from unittest.mock import MagicMock

import pytest

from mlvisio_track.container import build_container
from mlvisio_track.core.exceptions import NotFoundError
from mlvisio_track.database.record_store import Filter, RecordStore, StoredDocument
from mlvisio_track.main import create_app
from mlvisio_track.uploads.imgur_client import ImgurConfig

_MISSING = object()


def _matches(data: dict, flt: Filter) -> bool:
    field, op, value = flt
    actual = data.get(field, _MISSING)
    if actual is _MISSING:
        return False
    if op == "==":
        return actual == value
    if op == ">=":
        return actual >= value
    if op == "<=":
        return actual <= value
    if op == "in":
        return actual in value
    raise ValueError(f"unsupported operator {op}")


class InMemoryRecordStore(RecordStore):
    """Dict-backed stand-in for Firestore with the same query semantics we rely on.

    Documents lacking a filtered or ordered field are left out, as Firestore does.
    """

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self._ids = itertools.count(1)

    def _docs(self, collection: str) -> dict[str, dict]:
        return self.collections.setdefault(collection, {})

    def query(
        self,
        collection: str,
        *,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[StoredDocument]:
        rows = [
            (doc_id, data)
            for doc_id, data in self._docs(collection).items()
            if all(_matches(data, f) for f in filters)
        ]
        if order_by:
            rows = [r for r in rows if order_by in r[1]]
            rows.sort(key=lambda r: r[1][order_by], reverse=descending)
        if limit is not None:
            rows = rows[:limit]
        return [StoredDocument(doc_id, copy.deepcopy(data)) for doc_id, data in rows]

    def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        data = self._docs(collection).get(doc_id)
        return StoredDocument(doc_id, copy.deepcopy(data)) if data is not None else None

    def get_many(self, collection: str, doc_ids: Iterable[str]) -> dict[str, StoredDocument]:
        out = {}
        for doc_id in doc_ids:
            doc = self.get(collection, doc_id)
            if doc is not None:
                out[doc_id] = doc
        return out

    def set(self, collection: str, doc_id: str, data: dict) -> None:
        self._docs(collection)[doc_id] = copy.deepcopy(data)

    def add(self, collection: str, data: dict) -> str:
        doc_id = f"auto{next(self._ids)}"
        self.set(collection, doc_id, data)
        return doc_id

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        docs = self._docs(collection)
        if doc_id not in docs:
            raise NotFoundError(f"{collection}/{doc_id} not found")
        docs[doc_id].update(copy.deepcopy(data))

    def list_ids(self, collection: str) -> list[str]:
        ids = dict.fromkeys(self._docs(collection))
        # Parents of sub-collections exist even without fields of their own.
        prefix = collection + "/"
        for path in self.collections:
            if path.startswith(prefix):
                ids.setdefault(path[len(prefix) :].split("/", 1)[0])
        return list(ids)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 3, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 5, 3)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def http_session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def container(store, http_session):
    return build_container(
        store=store,
        imgur_config=ImgurConfig(client_id="test-client-id"),
        http_session=http_session,
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="mlvisio_track.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_user(store) -> Callable[..., None]:
    def _add(doc_id: str, **fields: Any) -> None:
        data = {"role": "student", "isActive": True, "department": "HNDIT"}
        data.update(fields)
        store.set("users", doc_id, data)

    return _add


@pytest.fixture
def add_attendance(store) -> Callable[..., None]:
    def _add(doc_id: str, **fields: Any) -> None:
        data = {"status": "Present", "subjectCode": "HNDIT401"}
        data.update(fields)
        store.set("attendance", doc_id, data)

    return _add
