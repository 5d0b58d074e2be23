from __future__ import annotations

import csv
import io
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_positive_id
from ..core.constants import DEFAULT_TUITION_AMOUNT
from ..core.enums import TuitionStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import OverdueTuition, Tuition
from .repository import TuitionRepository

OVERDUE_CSV_HEADERS = ("Học sinh", "Lớp", "Số tiền", "Kỳ phí", "Hạn nộp")


def default_period(today: date) -> str:
    return f"Tháng {today.month}/{today.year}"


class TuitionService:
    def __init__(self, tuitions: TuitionRepository, students: StudentRepository):
        self._tuitions = tuitions
        self._students = students

    def list_tuitions(self, *, status: str = "all") -> Sequence[Tuition]:
        status = (status or "all").strip().lower()
        if status == "all":
            return self._tuitions.list_all()
        try:
            return self._tuitions.list_all(status=TuitionStatus(status))
        except ValueError:
            raise ValidationError("Bộ lọc trạng thái không hợp lệ")

    def create_tuition(
        self,
        *,
        student_id: int,
        amount: int = DEFAULT_TUITION_AMOUNT,
        period: Optional[str] = None,
        due_date: Optional[date] = None,
        note: Optional[str] = None,
        today: Optional[date] = None,
    ) -> int:
        """Create a pending tuition for a student; the class comes from the student."""

        today = today or now_local().date()
        student = self._students.get_by_id(require_positive_id(student_id, "Học viên"))
        if not student:
            raise NotFoundError("Học viên không tồn tại")

        try:
            amount = int(amount)
        except (TypeError, ValueError):
            raise ValidationError("Số tiền không hợp lệ")
        if amount <= 0:
            raise ValidationError("Số tiền phải lớn hơn 0")

        return self._tuitions.create(
            class_id=student.class_id,
            student_id=student.student_id,
            amount=amount,
            period=optional_text(period) or default_period(today),
            due_date=due_date or today,
            note=optional_text(note),
        )

    def mark_paid(self, tuition_id: int, *, paid_at: Optional[datetime] = None) -> None:
        tuition = self._tuitions.get_by_id(int(tuition_id))
        if not tuition:
            raise NotFoundError("Phiếu thu không tồn tại")
        if tuition.status == TuitionStatus.PAID:
            raise ValidationError("Phiếu thu đã được thanh toán")

        if not self._tuitions.mark_paid(tuition_id=int(tuition_id), paid_at=paid_at or now_local()):
            raise ValidationError("Cập nhật phiếu thu thất bại")

    def list_overdue(self, as_of: Optional[date] = None, *, limit: Optional[int] = None) -> Sequence[OverdueTuition]:
        rows = list(self._tuitions.list_overdue(as_of or now_local().date()))
        return rows[:limit] if limit else rows

    def overdue_csv(self, as_of: Optional[date] = None) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(OVERDUE_CSV_HEADERS)
        for r in self.list_overdue(as_of):
            writer.writerow([r.student_name, r.class_name, str(r.amount), r.period, r.due_date.strftime("%Y-%m-%d")])

        # BOM so Excel opens Vietnamese text correctly.
        return out.getvalue().encode("utf-8-sig")
