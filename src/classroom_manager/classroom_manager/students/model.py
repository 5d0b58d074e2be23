from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học viên thuộc một lớp."""

    student_id: int
    class_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    parent_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    notes: Optional[str] = None
    joined_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "class_id": self.class_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "parent_name": self.parent_name,
            "date_of_birth": self.date_of_birth.strftime("%Y-%m-%d") if self.date_of_birth else None,
            "notes": self.notes,
        }
