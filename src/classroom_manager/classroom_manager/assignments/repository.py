from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Assignment


class AssignmentRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        raise NotImplementedError

    def create(self, *, class_id: int, title: str, description: Optional[str], due_date: Optional[date]) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        assignment_id: int,
        title: str,
        description: Optional[str],
        due_date: Optional[date],
    ) -> bool:
        raise NotImplementedError

    def delete(self, assignment_id: int) -> bool:
        raise NotImplementedError
