from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import QuestionType


@dataclass(frozen=True)
class Quiz:
    """Thực thể miền (domain): Bài kiểm tra của một lớp.

    Bài mới tạo ở trạng thái nháp (``is_published=False``); học viên chỉ làm được bài đã công bố.
    """

    quiz_id: int
    class_id: int
    title: str
    description: Optional[str] = None
    time_limit_minutes: Optional[int] = None
    is_published: bool = False
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "quiz_id": self.quiz_id,
            "class_id": self.class_id,
            "title": self.title,
            "description": self.description,
            "time_limit_minutes": self.time_limit_minutes,
            "is_published": self.is_published,
        }


@dataclass(frozen=True)
class QuizQuestion:
    question_id: int
    quiz_id: int
    question_text: str
    question_type: QuestionType
    options: tuple[str, ...] = ()
    correct_answer: Optional[str] = None
    points: int = 1
    order_index: int = 0

    def to_dict(self, *, include_answer: bool = True) -> dict:
        d = {
            "question_id": self.question_id,
            "quiz_id": self.quiz_id,
            "question_text": self.question_text,
            "question_type": self.question_type.value,
            "options": list(self.options),
            "points": self.points,
            "order_index": self.order_index,
        }
        if include_answer:
            d["correct_answer"] = self.correct_answer
        return d


@dataclass(frozen=True)
class QuizAttempt:
    """Một lần làm bài của học viên. ``answers`` là ``{question_id (str): đáp án}``."""

    attempt_id: int
    quiz_id: int
    student_id: int
    score: int
    answers: dict = field(default_factory=dict)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    # Filled by joined queries.
    student_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "attempt_id": self.attempt_id,
            "quiz_id": self.quiz_id,
            "student_id": self.student_id,
            "student_name": self.student_name,
            "score": self.score,
            "completed_at": self.completed_at.strftime("%Y-%m-%d %H:%M") if self.completed_at else None,
        }
