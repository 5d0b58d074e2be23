from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.codec import canonical_order, format_schedule
from .model import ClassRecord
from .repository import ClassRepository


class ClassService:
    """Use case: manage classes (teacher/admin)."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    @staticmethod
    def build_schedule(
        *,
        schedule: Optional[str] = None,
        days: Optional[Sequence[str]] = None,
        time: Optional[str] = None,
    ) -> Optional[str]:
        """Day picker wins over free text; the result is stored verbatim."""

        if days or time:
            return format_schedule(canonical_order(days or []), time) or None
        return optional_text(schedule)

    def list_classes(self) -> Sequence[ClassRecord]:
        return self._classes.list_all()

    def get(self, class_id: int) -> ClassRecord:
        cls = self._classes.get_by_id(int(class_id))
        if not cls:
            raise NotFoundError("Lớp học không tồn tại")
        return cls

    def create_class(
        self,
        *,
        name: str,
        schedule: Optional[str] = None,
        days: Optional[Sequence[str]] = None,
        time: Optional[str] = None,
        level: Optional[str] = None,
        owner_id: Optional[int] = None,
    ) -> int:
        name = require_non_empty(name, "Tên lớp")
        return self._classes.create(
            name=name,
            schedule=self.build_schedule(schedule=schedule, days=days, time=time),
            level=optional_text(level),
            owner_id=owner_id,
        )

    def update_class(
        self,
        *,
        class_id: int,
        name: str,
        schedule: Optional[str] = None,
        days: Optional[Sequence[str]] = None,
        time: Optional[str] = None,
        level: Optional[str] = None,
    ) -> None:
        self.get(class_id)
        name = require_non_empty(name, "Tên lớp")
        # MySQL reports 0 affected rows when nothing changed; existence is checked above.
        self._classes.update(
            class_id=int(class_id),
            name=name,
            schedule=self.build_schedule(schedule=schedule, days=days, time=time),
            level=optional_text(level),
        )

    def delete_class(self, class_id: int) -> None:
        if not self._classes.delete(int(class_id)):
            raise ValidationError("Xóa lớp thất bại")
