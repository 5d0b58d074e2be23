from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ClassRecord:
    """Thực thể miền (domain): Lớp học.

    ``schedule`` là chuỗi tự do dạng ``"T2/T4 - 19:00"``; không được kiểm tra khi lưu.
    """

    class_id: int
    name: str
    schedule: Optional[str] = None
    level: Optional[str] = None
    owner_id: Optional[int] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "class_id": self.class_id,
            "name": self.name,
            "schedule": self.schedule,
            "level": self.level,
        }
