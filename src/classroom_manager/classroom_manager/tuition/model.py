from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import TuitionStatus


@dataclass(frozen=True)
class Tuition:
    """Thực thể miền (domain): Phiếu thu học phí."""

    tuition_id: int
    class_id: int
    student_id: int
    amount: int
    period: str
    status: TuitionStatus
    due_date: Optional[date] = None
    paid_at: Optional[datetime] = None
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    # Filled by joined queries.
    student_name: Optional[str] = None
    class_name: Optional[str] = None

    def is_overdue(self, as_of: date) -> bool:
        return self.status == TuitionStatus.PENDING and self.due_date is not None and self.due_date <= as_of

    def to_dict(self) -> dict:
        return {
            "tuition_id": self.tuition_id,
            "class_id": self.class_id,
            "class_name": self.class_name,
            "student_id": self.student_id,
            "student_name": self.student_name,
            "amount": self.amount,
            "period": self.period,
            "status": self.status.value,
            "due_date": self.due_date.strftime("%Y-%m-%d") if self.due_date else None,
            "paid_at": self.paid_at.isoformat() if self.paid_at else None,
            "note": self.note,
        }


@dataclass(frozen=True)
class OverdueTuition:
    """Read-model: phiếu thu đã đến hạn nhưng chưa thanh toán."""

    tuition_id: int
    student_name: str
    class_name: str
    amount: int
    period: str
    due_date: date
