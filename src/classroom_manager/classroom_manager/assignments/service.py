from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Assignment
from .repository import AssignmentRepository


class AssignmentService:
    """Use case: giao bài tập cho lớp."""

    def __init__(self, assignments: AssignmentRepository, classes: ClassRepository):
        self._assignments = assignments
        self._classes = classes

    def _require_class(self, class_id: int) -> None:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")

    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        self._require_class(class_id)
        return self._assignments.list_for_class(int(class_id))

    def create_assignment(
        self,
        *,
        class_id: int,
        title: str,
        description: Optional[str] = None,
        due_date: Optional[date] = None,
    ) -> int:
        self._require_class(class_id)
        return self._assignments.create(
            class_id=int(class_id),
            title=require_non_empty(title, "Tiêu đề bài tập"),
            description=optional_text(description),
            due_date=due_date,
        )

    def update_assignment(
        self,
        *,
        assignment_id: int,
        title: str,
        description: Optional[str] = None,
        due_date: Optional[date] = None,
    ) -> None:
        if not self._assignments.get_by_id(int(assignment_id)):
            raise NotFoundError("Bài tập không tồn tại")
        self._assignments.update(
            assignment_id=int(assignment_id),
            title=require_non_empty(title, "Tiêu đề bài tập"),
            description=optional_text(description),
            due_date=due_date,
        )

    def delete_assignment(self, assignment_id: int) -> None:
        if not self._assignments.delete(int(assignment_id)):
            raise ValidationError("Xóa bài tập thất bại")
