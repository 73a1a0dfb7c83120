from __future__ import annotations

import logging
from typing import Sequence

from ..database.record_store import RecordStore
from .model import Subject
from .repository import SubjectRepository
from .sources import FlatSubjectSource, HierarchicalSubjectSource

logger = logging.getLogger(__name__)


class FirestoreSubjectRepository(SubjectRepository):
    def __init__(self, store: RecordStore):
        self._hierarchical = HierarchicalSubjectSource(store)
        self._flat = FlatSubjectSource(store)

    def list_for_department(self, department: str) -> Sequence[Subject]:
        subjects = self._hierarchical.list_for_department(department)
        if subjects:
            return subjects
        logger.debug("No hierarchical subjects for %s, using flat collection", department)
        return self._flat.list_for_department(department)

    def count_hierarchical(self, department: str) -> int:
        return self._hierarchical.count_for_department(department)
