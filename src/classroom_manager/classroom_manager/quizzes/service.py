from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty, require_positive_id
from ..core.constants import (
    DEFAULT_QUESTION_OPTIONS,
    DEFAULT_QUESTION_TEXT,
    DEFAULT_QUIZ_TIME_LIMIT_MINUTES,
    TRUE_FALSE_OPTIONS,
)
from ..core.enums import QuestionType
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import Quiz, QuizAttempt, QuizQuestion
from .repository import QuizRepository

logger = logging.getLogger(__name__)


def question_points(q: QuizQuestion) -> int:
    return q.points or 1


def score_answers(questions: Sequence[QuizQuestion], answers: Mapping[str, str]) -> int:
    """Sum the points of questions answered exactly like ``correct_answer``."""

    score = 0
    for q in questions:
        given = answers.get(str(q.question_id))
        if given is not None and q.correct_answer is not None and given == q.correct_answer:
            score += question_points(q)
    return score


@dataclass(frozen=True)
class QuizResults:
    quiz: Quiz
    max_score: int
    question_count: int
    attempts: list[QuizAttempt]

    def to_dict(self) -> dict:
        scores = [a.score for a in self.attempts]
        return {
            "quiz": self.quiz.to_dict(),
            "max_score": self.max_score,
            "question_count": self.question_count,
            "attempt_count": len(scores),
            "average_score": round(sum(scores) / len(scores), 1) if scores else 0.0,
            "attempts": [a.to_dict() for a in self.attempts],
        }


class QuizService:
    """Use case: soạn bài kiểm tra, học viên làm bài và xem kết quả."""

    def __init__(self, quizzes: QuizRepository, classes: ClassRepository, students: StudentRepository):
        self._quizzes = quizzes
        self._classes = classes
        self._students = students

    # ---- quizzes ----

    def list_for_class(self, class_id: int, *, published_only: bool = False) -> Sequence[Quiz]:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")
        return self._quizzes.list_for_class(int(class_id), published_only=published_only)

    def get(self, quiz_id: int) -> Quiz:
        quiz = self._quizzes.get_by_id(int(quiz_id))
        if not quiz:
            raise NotFoundError("Bài kiểm tra không tồn tại")
        return quiz

    @staticmethod
    def _time_limit(value) -> Optional[int]:
        if value is None or value == "":
            return None
        try:
            minutes = int(value)
        except (TypeError, ValueError):
            raise ValidationError("Thời gian làm bài không hợp lệ")
        if minutes <= 0:
            raise ValidationError("Thời gian làm bài phải lớn hơn 0")
        return minutes

    def create_quiz(
        self,
        *,
        class_id: int,
        title: str,
        description: Optional[str] = None,
        time_limit_minutes=DEFAULT_QUIZ_TIME_LIMIT_MINUTES,
    ) -> int:
        """New quizzes start as drafts."""

        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")
        return self._quizzes.create(
            class_id=int(class_id),
            title=require_non_empty(title, "Tiêu đề bài kiểm tra"),
            description=optional_text(description),
            time_limit_minutes=self._time_limit(time_limit_minutes),
        )

    def update_quiz(
        self,
        *,
        quiz_id: int,
        title: str,
        description: Optional[str] = None,
        time_limit_minutes=None,
    ) -> None:
        self.get(quiz_id)
        self._quizzes.update(
            quiz_id=int(quiz_id),
            title=require_non_empty(title, "Tiêu đề bài kiểm tra"),
            description=optional_text(description),
            time_limit_minutes=self._time_limit(time_limit_minutes),
        )

    def toggle_publish(self, quiz_id: int) -> bool:
        quiz = self.get(quiz_id)
        published = not quiz.is_published
        self._quizzes.set_published(quiz.quiz_id, published)
        return published

    def delete_quiz(self, quiz_id: int) -> None:
        if not self._quizzes.delete(int(quiz_id)):
            raise ValidationError("Xóa bài kiểm tra thất bại")

    # ---- questions ----

    def questions(self, quiz_id: int) -> Sequence[QuizQuestion]:
        self.get(quiz_id)
        return self._quizzes.list_questions(int(quiz_id))

    @staticmethod
    def _normalize(question_type, options, correct_answer, points):
        try:
            qtype = QuestionType(str(question_type or QuestionType.MULTIPLE_CHOICE.value).strip().lower())
        except ValueError:
            raise ValidationError("Loại câu hỏi không hợp lệ")

        try:
            points = int(points)
        except (TypeError, ValueError):
            raise ValidationError("Điểm câu hỏi không hợp lệ")
        if points <= 0:
            raise ValidationError("Điểm câu hỏi phải lớn hơn 0")

        if qtype == QuestionType.TEXT:
            return qtype, (), optional_text(correct_answer), points

        if qtype == QuestionType.TRUE_FALSE:
            opts = TRUE_FALSE_OPTIONS
        else:
            if isinstance(options, str):
                raise ValidationError("Danh sách lựa chọn không hợp lệ")
            opts = tuple(o for o in (str(x).strip() for x in (options or DEFAULT_QUESTION_OPTIONS)) if o)
            if len(opts) < 2:
                raise ValidationError("Câu hỏi trắc nghiệm cần ít nhất 2 lựa chọn")

        answer = optional_text(correct_answer) or opts[0]
        if answer not in opts:
            raise ValidationError("Đáp án đúng phải là một trong các lựa chọn")
        return qtype, opts, answer, points

    def add_question(
        self,
        *,
        quiz_id: int,
        question_text: Optional[str] = None,
        question_type=QuestionType.MULTIPLE_CHOICE.value,
        options: Optional[Sequence[str]] = None,
        correct_answer: Optional[str] = None,
        points=1,
    ) -> int:
        """Append a question; omitted fields get the editor's defaults."""

        self.get(quiz_id)
        qtype, opts, answer, points = self._normalize(question_type, options, correct_answer, points)
        return self._quizzes.add_question(
            quiz_id=int(quiz_id),
            question_text=optional_text(question_text) or DEFAULT_QUESTION_TEXT,
            question_type=qtype,
            options=opts,
            correct_answer=answer,
            points=points,
            order_index=len(self._quizzes.list_questions(int(quiz_id))),
        )

    def update_question(
        self,
        *,
        question_id: int,
        question_text: str,
        question_type=QuestionType.MULTIPLE_CHOICE.value,
        options: Optional[Sequence[str]] = None,
        correct_answer: Optional[str] = None,
        points=1,
    ) -> None:
        if not self._quizzes.get_question(int(question_id)):
            raise NotFoundError("Câu hỏi không tồn tại")
        qtype, opts, answer, points = self._normalize(question_type, options, correct_answer, points)
        self._quizzes.update_question(
            question_id=int(question_id),
            question_text=require_non_empty(question_text, "Nội dung câu hỏi"),
            question_type=qtype,
            options=opts,
            correct_answer=answer,
            points=points,
        )

    def delete_question(self, question_id: int) -> None:
        if not self._quizzes.delete_question(int(question_id)):
            raise ValidationError("Xóa câu hỏi thất bại")

    # ---- attempts ----

    def submit_attempt(
        self,
        *,
        quiz_id: int,
        student_id: int,
        answers: Mapping,
        started_at: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> QuizAttempt:
        quiz = self.get(quiz_id)
        if not quiz.is_published:
            raise ValidationError("Bài kiểm tra chưa được công bố")

        student = self._students.get_by_id(require_positive_id(student_id, "Học viên"))
        if not student:
            raise NotFoundError("Học viên không tồn tại")
        if student.class_id != quiz.class_id:
            raise ValidationError("Học viên không thuộc lớp của bài kiểm tra")

        if not isinstance(answers, Mapping):
            raise ValidationError("Dữ liệu bài làm không hợp lệ")
        normalized = {str(k): str(v) for k, v in answers.items() if v is not None}

        questions = self._quizzes.list_questions(quiz.quiz_id)
        if not questions:
            raise ValidationError("Bài kiểm tra chưa có câu hỏi")

        score = score_answers(questions, normalized)
        completed_at = now or now_local()
        attempt_id = self._quizzes.create_attempt(
            quiz_id=quiz.quiz_id,
            student_id=student.student_id,
            score=score,
            answers=normalized,
            started_at=started_at,
            completed_at=completed_at,
        )
        logger.info("Quiz %s attempt %s by student %s scored %s", quiz.quiz_id, attempt_id, student.student_id, score)
        return QuizAttempt(
            attempt_id=attempt_id,
            quiz_id=quiz.quiz_id,
            student_id=student.student_id,
            score=score,
            answers=normalized,
            started_at=started_at or completed_at,
            completed_at=completed_at,
            student_name=student.name,
        )

    def results(self, quiz_id: int) -> QuizResults:
        quiz = self.get(quiz_id)
        questions = self._quizzes.list_questions(quiz.quiz_id)
        return QuizResults(
            quiz=quiz,
            max_score=sum(question_points(q) for q in questions),
            question_count=len(questions),
            attempts=list(self._quizzes.list_attempts(quiz.quiz_id)),
        )
