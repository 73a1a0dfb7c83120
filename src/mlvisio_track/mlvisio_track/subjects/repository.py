from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_for_department(self, department: str) -> Sequence[Subject]:
        """Hierarchical subjects for the department, flat collection if there are none."""

        raise NotImplementedError

    def count_hierarchical(self, department: str) -> int:
        raise NotImplementedError
