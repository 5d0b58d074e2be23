from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Vai trò người dùng."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của một học viên trong một buổi học."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class TuitionStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class AlertKind(str, Enum):
    MISSING_ATTENDANCE = "missing-attendance"
    TUITION_OVERDUE = "tuition-overdue"


class AlertSeverity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class QuestionType(str, Enum):
    """Loại câu hỏi trong bài kiểm tra."""

    MULTIPLE_CHOICE = "multiple_choice"
    TEXT = "text"
    TRUE_FALSE = "true_false"
