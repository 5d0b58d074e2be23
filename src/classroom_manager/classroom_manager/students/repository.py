from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        class_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        student_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, student_id: int) -> bool:
        raise NotImplementedError
