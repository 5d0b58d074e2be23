from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceMark, AttendanceRecord


class AttendanceRepository(Protocol):
    def count_for_class_on_date(self, class_id: int, on: date) -> int:
        raise NotImplementedError

    def list_for_class_on_date(self, class_id: int, on: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert_many(self, *, class_id: int, on: date, marks: Sequence[AttendanceMark]) -> int:
        """Create or update one row per (student, class, date).

        Returns number of marks written.
        """

        raise NotImplementedError

    def list_in_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
