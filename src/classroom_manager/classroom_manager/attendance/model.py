from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Điểm danh một học viên trong một buổi."""

    attendance_id: int
    student_id: int
    class_id: int
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSheetRow:
    """Read-model cho màn hình điểm danh: mọi học viên của lớp kèm trạng thái."""

    student_id: int
    student_name: str
    status: AttendanceStatus
    recorded: bool

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.student_name,
            "status": self.status.value,
            "recorded": self.recorded,
        }


@dataclass(frozen=True)
class AttendanceMark:
    student_id: int
    status: AttendanceStatus
