from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Assignment:
    """Thực thể miền (domain): Bài tập giao cho một lớp."""

    assignment_id: int
    class_id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "assignment_id": self.assignment_id,
            "class_id": self.class_id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date.strftime("%Y-%m-%d") if self.due_date else None,
        }
