from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import TuitionStatus
from .model import OverdueTuition, Tuition


class TuitionRepository(Protocol):
    def list_all(self, *, status: Optional[TuitionStatus] = None) -> Sequence[Tuition]:
        """Newest first, joined with student/class names."""

        raise NotImplementedError

    def list_overdue(self, as_of: date) -> Sequence[OverdueTuition]:
        """Pending tuitions with ``due_date <= as_of``."""

        raise NotImplementedError

    def get_by_id(self, tuition_id: int) -> Optional[Tuition]:
        raise NotImplementedError

    def create(
        self,
        *,
        class_id: int,
        student_id: int,
        amount: int,
        period: str,
        due_date: Optional[date],
        note: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def mark_paid(self, *, tuition_id: int, paid_at: datetime) -> bool:
        raise NotImplementedError
