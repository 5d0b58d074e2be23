from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Sequence

from ..classes.repository import ClassRepository
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceMark, AttendanceSheetRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: take and review attendance for one class on one date."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository, classes: ClassRepository):
        self._attendance = attendance
        self._students = students
        self._classes = classes

    def _require_class(self, class_id: int) -> None:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")

    def sheet(self, class_id: int, on: date) -> list[AttendanceSheetRow]:
        """Every student of the class; students without a record default to present."""

        self._require_class(class_id)
        students = self._students.list_for_class(int(class_id))
        recorded = {r.student_id: r.status for r in self._attendance.list_for_class_on_date(int(class_id), on)}

        return [
            AttendanceSheetRow(
                student_id=s.student_id,
                student_name=s.name,
                status=recorded.get(s.student_id, AttendanceStatus.PRESENT),
                recorded=s.student_id in recorded,
            )
            for s in students
        ]

    @staticmethod
    def _parse_status(value) -> AttendanceStatus:
        try:
            return AttendanceStatus(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Trạng thái điểm danh không hợp lệ: {value}")

    @staticmethod
    def _parse_student_id(value) -> int:
        try:
            return int(str(value).strip())
        except ValueError:
            raise ValidationError(f"Mã học viên không hợp lệ: {value}")

    def save(self, class_id: int, on: date, marks: Mapping[int, str] | Sequence[AttendanceMark]) -> int:
        self._require_class(class_id)

        if isinstance(marks, Mapping):
            parsed = [
                AttendanceMark(student_id=self._parse_student_id(sid), status=self._parse_status(st))
                for sid, st in marks.items()
            ]
        else:
            parsed = list(marks)

        if not parsed:
            raise ValidationError("Lớp chưa có học viên để điểm danh")

        known = {s.student_id for s in self._students.list_for_class(int(class_id))}
        unknown = [m.student_id for m in parsed if m.student_id not in known]
        if unknown:
            raise ValidationError(f"Học viên không thuộc lớp: {', '.join(str(u) for u in unknown)}")

        written = self._attendance.upsert_many(class_id=int(class_id), on=on, marks=parsed)
        logger.info("Saved %s attendance marks for class %s on %s", written, class_id, on)
        return written

    def count_for_class_on_date(self, class_id: int, on: date) -> int:
        return self._attendance.count_for_class_on_date(int(class_id), on)
