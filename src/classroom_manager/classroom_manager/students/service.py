from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository


class StudentService:
    def __init__(self, students: StudentRepository, classes: ClassRepository):
        self._students = students
        self._classes = classes

    def list_for_class(self, class_id: int) -> Sequence[Student]:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")
        return self._students.list_for_class(int(class_id))

    def add_student(
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
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")
        return self._students.create(
            class_id=int(class_id),
            name=require_non_empty(name, "Tên học viên"),
            email=optional_text(email),
            phone=optional_text(phone),
            parent_name=optional_text(parent_name),
            date_of_birth=date_of_birth,
            notes=optional_text(notes),
        )

    def update_student(
        self,
        *,
        student_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> None:
        if not self._students.get_by_id(int(student_id)):
            raise NotFoundError("Học viên không tồn tại")
        self._students.update(
            student_id=int(student_id),
            name=require_non_empty(name, "Tên học viên"),
            email=optional_text(email),
            phone=optional_text(phone),
            parent_name=optional_text(parent_name),
            date_of_birth=date_of_birth,
            notes=optional_text(notes),
        )

    def remove_student(self, student_id: int) -> None:
        if not self._students.delete(int(student_id)):
            raise ValidationError("Xóa học viên thất bại")
