from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import QuestionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json
from .model import Quiz, QuizAttempt, QuizQuestion
from .repository import QuizRepository

_QUIZ_COLUMNS = "quiz_id, class_id, title, description, time_limit_minutes, is_published, created_at"
_QUESTION_COLUMNS = "question_id, quiz_id, question_text, question_type, options, correct_answer, points, order_index"


def _row_to_quiz(r: dict) -> Quiz:
    return Quiz(
        quiz_id=int(r["quiz_id"]),
        class_id=int(r["class_id"]),
        title=r["title"],
        description=r.get("description"),
        time_limit_minutes=int(r["time_limit_minutes"]) if r.get("time_limit_minutes") is not None else None,
        is_published=bool(r.get("is_published")),
        created_at=r.get("created_at"),
    )


def _row_to_question(r: dict) -> QuizQuestion:
    return QuizQuestion(
        question_id=int(r["question_id"]),
        quiz_id=int(r["quiz_id"]),
        question_text=r["question_text"],
        question_type=QuestionType(r["question_type"]),
        options=tuple(str(o) for o in load_json(r.get("options"), [])),
        correct_answer=r.get("correct_answer"),
        points=int(r.get("points") or 1),
        order_index=int(r.get("order_index") or 0),
    )


def _row_to_attempt(r: dict) -> QuizAttempt:
    return QuizAttempt(
        attempt_id=int(r["attempt_id"]),
        quiz_id=int(r["quiz_id"]),
        student_id=int(r["student_id"]),
        score=int(r.get("score") or 0),
        answers=load_json(r.get("answers"), {}),
        started_at=r.get("started_at"),
        completed_at=r.get("completed_at"),
        student_name=r.get("student_name"),
    )


class MySQLQuizRepository(QuizRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int, *, published_only: bool = False) -> Sequence[Quiz]:
        where = "WHERE class_id=%s"
        if published_only:
            where += " AND is_published=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_QUIZ_COLUMNS} FROM quizzes {where} ORDER BY created_at DESC, quiz_id DESC",
                (int(class_id),),
            )
            return [_row_to_quiz(r) for r in fetchall(cur)]

    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_QUIZ_COLUMNS} FROM quizzes WHERE quiz_id=%s", (int(quiz_id),))
            r = fetchone(cur)
            return _row_to_quiz(r) if r else None

    def create(
        self,
        *,
        class_id: int,
        title: str,
        description: Optional[str],
        time_limit_minutes: Optional[int],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO quizzes(class_id, title, description, time_limit_minutes, is_published)
                VALUES(%s,%s,%s,%s,0)
                """,
                (int(class_id), title, description, time_limit_minutes),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        quiz_id: int,
        title: str,
        description: Optional[str],
        time_limit_minutes: Optional[int],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE quizzes SET title=%s, description=%s, time_limit_minutes=%s WHERE quiz_id=%s",
                (title, description, time_limit_minutes, int(quiz_id)),
            )
            return cur.rowcount > 0

    def set_published(self, quiz_id: int, published: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE quizzes SET is_published=%s WHERE quiz_id=%s", (1 if published else 0, int(quiz_id)))
            return cur.rowcount > 0

    def delete(self, quiz_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM quizzes WHERE quiz_id=%s", (int(quiz_id),))
            return cur.rowcount > 0

    def list_questions(self, quiz_id: int) -> Sequence[QuizQuestion]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_QUESTION_COLUMNS} FROM quiz_questions WHERE quiz_id=%s ORDER BY order_index, question_id",
                (int(quiz_id),),
            )
            return [_row_to_question(r) for r in fetchall(cur)]

    def get_question(self, question_id: int) -> Optional[QuizQuestion]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_QUESTION_COLUMNS} FROM quiz_questions WHERE question_id=%s", (int(question_id),))
            r = fetchone(cur)
            return _row_to_question(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO quiz_questions(quiz_id, question_text, question_type, options, correct_answer, points, order_index)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(quiz_id),
                    question_text,
                    question_type.value,
                    dump_json(list(options)),
                    correct_answer,
                    int(points),
                    int(order_index),
                ),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE quiz_questions
                SET question_text=%s, question_type=%s, options=%s, correct_answer=%s, points=%s
                WHERE question_id=%s
                """,
                (
                    question_text,
                    question_type.value,
                    dump_json(list(options)),
                    correct_answer,
                    int(points),
                    int(question_id),
                ),
            )
            return cur.rowcount > 0

    def delete_question(self, question_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM quiz_questions WHERE question_id=%s", (int(question_id),))
            return cur.rowcount > 0

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO quiz_attempts(quiz_id, student_id, score, answers, started_at, completed_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(quiz_id), int(student_id), int(score), dump_json(answers), started_at or completed_at, completed_at),
            )
            return int(cur.lastrowid)

    def list_attempts(self, quiz_id: int) -> Sequence[QuizAttempt]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.attempt_id, a.quiz_id, a.student_id, a.score, a.answers, a.started_at, a.completed_at,
                       s.name AS student_name
                FROM quiz_attempts a
                LEFT JOIN students s ON s.student_id = a.student_id
                WHERE a.quiz_id=%s
                ORDER BY a.completed_at DESC, a.attempt_id DESC
                """,
                (int(quiz_id),),
            )
            return [_row_to_attempt(r) for r in fetchall(cur)]
