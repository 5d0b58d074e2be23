from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import QuestionType
from .model import Quiz, QuizAttempt, QuizQuestion


class QuizRepository(Protocol):
    """Quizzes together with their questions and attempts."""

    def list_for_class(self, class_id: int, *, published_only: bool = False) -> Sequence[Quiz]:
        raise NotImplementedError

    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        raise NotImplementedError

    def create(
        self,
        *,
        class_id: int,
        title: str,
        description: Optional[str],
        time_limit_minutes: Optional[int],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        quiz_id: int,
        title: str,
        description: Optional[str],
        time_limit_minutes: Optional[int],
    ) -> bool:
        raise NotImplementedError

    def set_published(self, quiz_id: int, published: bool) -> bool:
        raise NotImplementedError

    def delete(self, quiz_id: int) -> bool:
        raise NotImplementedError

    def list_questions(self, quiz_id: int) -> Sequence[QuizQuestion]:
        """Ordered by ``order_index``."""

        raise NotImplementedError

    def get_question(self, question_id: int) -> Optional[QuizQuestion]:
        raise NotImplementedError

    def add_question(
        self,
        *,
        quiz_id: int,
        question_text: str,
        question_type: QuestionType,
        options: Sequence[str],
        correct_answer: Optional[str],
        points: int,
        order_index: int,
    ) -> int:
        raise NotImplementedError

    def update_question(
        self,
        *,
        question_id: int,
        question_text: str,
        question_type: QuestionType,
        options: Sequence[str],
        correct_answer: Optional[str],
        points: int,
    ) -> bool:
        raise NotImplementedError

    def delete_question(self, question_id: int) -> bool:
        raise NotImplementedError

    def create_attempt(
        self,
        *,
        quiz_id: int,
        student_id: int,
        score: int,
        answers: dict,
        started_at: Optional[datetime],
        completed_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_attempts(self, quiz_id: int) -> Sequence[QuizAttempt]:
        """Most recently completed first, with ``student_name`` filled."""

        raise NotImplementedError
