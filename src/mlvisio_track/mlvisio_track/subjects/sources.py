"""Backing layouts for subject documents.

Subjects live either under ``courses/{department}/semesters/{semester}/subjects``
or in the flat ``subjects`` collection with a ``department`` field.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..core.constants import COURSES, SUBJECTS
from ..database.record_store import RecordStore
from .model import Subject


class SubjectSource(Protocol):
    def list_for_department(self, department: str) -> Sequence[Subject]:
        raise NotImplementedError


class HierarchicalSubjectSource(SubjectSource):
    def __init__(self, store: RecordStore):
        self._store = store

    def _semesters(self, department: str) -> list[str]:
        return self._store.list_ids(f"{COURSES}/{department}/semesters")

    def list_for_department(self, department: str) -> Sequence[Subject]:
        subjects: list[Subject] = []
        for semester in self._semesters(department):
            path = f"{COURSES}/{department}/semesters/{semester}/{SUBJECTS}"
            subjects.extend(Subject.from_document(d, department=department) for d in self._store.query(path))
        return subjects

    def count_for_department(self, department: str) -> int:
        return len(self.list_for_department(department))


class FlatSubjectSource(SubjectSource):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_for_department(self, department: str) -> Sequence[Subject]:
        docs = self._store.query(SUBJECTS, filters=[("department", "==", department)])
        return [Subject.from_document(d) for d in docs]
