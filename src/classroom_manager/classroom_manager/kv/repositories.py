from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from werkzeug.security import generate_password_hash

from ..assignments.model import Assignment
from ..assignments.repository import AssignmentRepository
from ..attendance.model import AttendanceMark, AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..classes.model import ClassRecord
from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_local, parse_iso_date
from ..core.enums import AttendanceStatus, QuestionType, Role, TuitionStatus
from ..quizzes.model import Quiz, QuizAttempt, QuizQuestion
from ..quizzes.repository import QuizRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from ..tuition.model import OverdueTuition, Tuition
from ..tuition.repository import TuitionRepository
from ..users.model import Profile
from ..users.repository import ProfileRepository
from ..vocabulary.model import VocabularyList, VocabularyWord, words_from_dicts
from ..vocabulary.repository import VocabularyRepository
from .store import KeyValueStore


def _as_date(value) -> Optional[date]:
    return parse_iso_date(value[:10]) if value else None


def _as_datetime(value) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _id_key(prefix: str):
    return lambda doc: f"{prefix}{doc['id']}"


def _owned_by(field: str, value: int):
    return lambda doc: int(doc[field]) == value


def _purge(store: KeyValueStore, prefix: str, key_of, predicate) -> list[dict]:
    removed = []
    for doc in store.get_by_prefix(prefix):
        if predicate(doc) and store.delete(key_of(doc)):
            removed.append(doc)
    return removed


def delete_student_dependents(store: KeyValueStore, student_id: int) -> None:
    """Mirror the ON DELETE CASCADE rules of the students table."""

    owned = _owned_by("student_id", student_id)
    _purge(store, KVAttendanceRepository.PREFIX, KVAttendanceRepository.key_of, owned)
    _purge(store, KVTuitionRepository.PREFIX, _id_key(KVTuitionRepository.PREFIX), owned)
    _purge(store, KVQuizRepository.ATTEMPT_PREFIX, _id_key(KVQuizRepository.ATTEMPT_PREFIX), owned)


def delete_quiz_dependents(store: KeyValueStore, quiz_id: int) -> None:
    owned = _owned_by("quiz_id", quiz_id)
    _purge(store, KVQuizRepository.QUESTION_PREFIX, _id_key(KVQuizRepository.QUESTION_PREFIX), owned)
    _purge(store, KVQuizRepository.ATTEMPT_PREFIX, _id_key(KVQuizRepository.ATTEMPT_PREFIX), owned)


def delete_class_dependents(store: KeyValueStore, class_id: int) -> None:
    """Mirror the ON DELETE CASCADE rules of the classes table."""

    owned = _owned_by("class_id", class_id)
    for doc in _purge(store, KVStudentRepository.PREFIX, _id_key(KVStudentRepository.PREFIX), owned):
        delete_student_dependents(store, int(doc["id"]))
    for doc in _purge(store, KVQuizRepository.PREFIX, _id_key(KVQuizRepository.PREFIX), owned):
        delete_quiz_dependents(store, int(doc["id"]))

    _purge(store, KVAttendanceRepository.PREFIX, KVAttendanceRepository.key_of, owned)
    _purge(store, KVTuitionRepository.PREFIX, _id_key(KVTuitionRepository.PREFIX), owned)
    _purge(store, KVAssignmentRepository.PREFIX, _id_key(KVAssignmentRepository.PREFIX), owned)
    _purge(store, KVVocabularyRepository.PREFIX, _id_key(KVVocabularyRepository.PREFIX), owned)


class KVClassRepository(ClassRepository):
    PREFIX = "class:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _to_model(doc: dict) -> ClassRecord:
        return ClassRecord(
            class_id=int(doc["id"]),
            name=doc["name"],
            schedule=doc.get("schedule"),
            level=doc.get("level"),
            owner_id=doc.get("owner_id"),
            created_at=_as_datetime(doc.get("created_at")),
        )

    def list_all(self) -> Sequence[ClassRecord]:
        classes = [self._to_model(d) for d in self._store.get_by_prefix(self.PREFIX)]
        classes.sort(key=lambda c: c.name)
        return classes

    def get_by_id(self, class_id: int) -> Optional[ClassRecord]:
        doc = self._store.get(f"{self.PREFIX}{int(class_id)}")
        return self._to_model(doc) if doc else None

    def create(
        self,
        *,
        name: str,
        schedule: Optional[str],
        level: Optional[str],
        owner_id: Optional[int] = None,
    ) -> int:
        class_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{class_id}",
            {
                "id": class_id,
                "name": name,
                "schedule": schedule,
                "level": level,
                "owner_id": owner_id,
                "created_at": now_local(),
            },
        )
        return class_id

    def update(self, *, class_id: int, name: str, schedule: Optional[str], level: Optional[str]) -> bool:
        key = f"{self.PREFIX}{int(class_id)}"
        doc = self._store.get(key)
        if not doc:
            return False
        doc.update({"name": name, "schedule": schedule, "level": level, "updated_at": now_local()})
        self._store.set(key, doc)
        return True

    def delete(self, class_id: int) -> bool:
        if not self._store.delete(f"{self.PREFIX}{int(class_id)}"):
            return False
        delete_class_dependents(self._store, int(class_id))
        return True


class KVStudentRepository(StudentRepository):
    PREFIX = "student:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _to_model(doc: dict) -> Student:
        return Student(
            student_id=int(doc["id"]),
            class_id=int(doc["class_id"]),
            name=doc["name"],
            email=doc.get("email"),
            phone=doc.get("phone"),
            parent_name=doc.get("parent_name"),
            date_of_birth=_as_date(doc.get("date_of_birth")),
            notes=doc.get("notes"),
            joined_at=_as_datetime(doc.get("joined_at")),
        )

    def list_for_class(self, class_id: int) -> Sequence[Student]:
        students = [
            self._to_model(d) for d in self._store.get_by_prefix(self.PREFIX) if int(d["class_id"]) == int(class_id)
        ]
        students.sort(key=lambda s: s.name)
        return students

    def get_by_id(self, student_id: int) -> Optional[Student]:
        doc = self._store.get(f"{self.PREFIX}{int(student_id)}")
        return self._to_model(doc) if doc else None

    def create(
        self,
        *,
        class_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> int:
        student_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{student_id}",
            {
                "id": student_id,
                "class_id": int(class_id),
                "name": name,
                "email": email,
                "phone": phone,
                "parent_name": parent_name,
                "date_of_birth": date_of_birth,
                "notes": notes,
                "joined_at": now_local(),
            },
        )
        return student_id

    def update(
        self,
        *,
        student_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> bool:
        key = f"{self.PREFIX}{int(student_id)}"
        doc = self._store.get(key)
        if not doc:
            return False
        doc.update(
            {
                "name": name,
                "email": email,
                "phone": phone,
                "parent_name": parent_name,
                "date_of_birth": date_of_birth,
                "notes": notes,
            }
        )
        self._store.set(key, doc)
        return True

    def delete(self, student_id: int) -> bool:
        if not self._store.delete(f"{self.PREFIX}{int(student_id)}"):
            return False
        delete_student_dependents(self._store, int(student_id))
        return True


class KVAttendanceRepository(AttendanceRepository):
    """One document per (class, student, date) so re-saving a sheet overwrites it."""

    PREFIX = "attendance:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _key(self, class_id: int, student_id: int, on: date) -> str:
        return f"{self.PREFIX}{int(class_id)}:{int(student_id)}:{on.isoformat()}"

    @classmethod
    def key_of(cls, doc: dict) -> str:
        return f"{cls.PREFIX}{int(doc['class_id'])}:{int(doc['student_id'])}:{doc['date']}"

    @staticmethod
    def _to_model(doc: dict) -> AttendanceRecord:
        return AttendanceRecord(
            attendance_id=int(doc["id"]),
            student_id=int(doc["student_id"]),
            class_id=int(doc["class_id"]),
            date=_as_date(doc["date"]),
            status=AttendanceStatus(doc["status"]),
        )

    def list_for_class_on_date(self, class_id: int, on: date) -> Sequence[AttendanceRecord]:
        prefix = f"{self.PREFIX}{int(class_id)}:"
        return [self._to_model(d) for d in self._store.get_by_prefix(prefix) if d["date"] == on.isoformat()]

    def count_for_class_on_date(self, class_id: int, on: date) -> int:
        return len(self.list_for_class_on_date(class_id, on))

    def upsert_many(self, *, class_id: int, on: date, marks: Sequence[AttendanceMark]) -> int:
        for m in marks:
            key = self._key(class_id, m.student_id, on)
            existing = self._store.get(key)
            record_id = int(existing["id"]) if existing else self._store.next_id(self.PREFIX)
            self._store.set(
                key,
                {
                    "id": record_id,
                    "class_id": int(class_id),
                    "student_id": int(m.student_id),
                    "date": on.isoformat(),
                    "status": m.status.value,
                    "created_at": (existing or {}).get("created_at") or now_local(),
                },
            )
        return len(marks)

    def list_in_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        records = [self._to_model(d) for d in self._store.get_by_prefix(self.PREFIX)]
        records = [r for r in records if start <= r.date <= end]
        records.sort(key=lambda r: (r.date, r.class_id))
        return records


class KVTuitionRepository(TuitionRepository):
    PREFIX = "tuition:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _names(self, doc: dict) -> tuple[Optional[str], Optional[str]]:
        student = self._store.get(f"{KVStudentRepository.PREFIX}{doc['student_id']}")
        cls = self._store.get(f"{KVClassRepository.PREFIX}{doc['class_id']}")
        return (student or {}).get("name"), (cls or {}).get("name")

    def _to_model(self, doc: dict) -> Tuition:
        student_name, class_name = self._names(doc)
        return Tuition(
            tuition_id=int(doc["id"]),
            class_id=int(doc["class_id"]),
            student_id=int(doc["student_id"]),
            amount=int(doc["amount"]),
            period=doc["period"],
            status=TuitionStatus(doc["status"]),
            due_date=_as_date(doc.get("due_date")),
            paid_at=_as_datetime(doc.get("paid_at")),
            note=doc.get("note"),
            created_at=_as_datetime(doc.get("created_at")),
            student_name=student_name,
            class_name=class_name,
        )

    def list_all(self, *, status: Optional[TuitionStatus] = None) -> Sequence[Tuition]:
        docs = self._store.get_by_prefix(self.PREFIX)
        if status is not None:
            docs = [d for d in docs if d["status"] == status.value]
        docs.sort(key=lambda d: int(d["id"]), reverse=True)
        return [self._to_model(d) for d in docs]

    def list_overdue(self, as_of: date) -> Sequence[OverdueTuition]:
        out = [t for t in self.list_all(status=TuitionStatus.PENDING) if t.is_overdue(as_of)]
        out.sort(key=lambda t: (t.due_date, t.tuition_id))
        return [
            OverdueTuition(
                tuition_id=t.tuition_id,
                student_name=t.student_name or "-",
                class_name=t.class_name or "-",
                amount=t.amount,
                period=t.period,
                due_date=t.due_date,
            )
            for t in out
        ]

    def get_by_id(self, tuition_id: int) -> Optional[Tuition]:
        doc = self._store.get(f"{self.PREFIX}{int(tuition_id)}")
        return self._to_model(doc) if doc else None

    def create(
        self,
        *,
        class_id: int,
        student_id: int,
        amount: int,
        period: str,
        due_date: Optional[date],
        note: Optional[str] = None,
    ) -> int:
        tuition_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{tuition_id}",
            {
                "id": tuition_id,
                "class_id": int(class_id),
                "student_id": int(student_id),
                "amount": int(amount),
                "period": period,
                "status": TuitionStatus.PENDING.value,
                "due_date": due_date,
                "paid_at": None,
                "note": note,
                "created_at": now_local(),
            },
        )
        return tuition_id

    def mark_paid(self, *, tuition_id: int, paid_at: datetime) -> bool:
        key = f"{self.PREFIX}{int(tuition_id)}"
        doc = self._store.get(key)
        if not doc or doc["status"] == TuitionStatus.PAID.value:
            return False
        doc.update({"status": TuitionStatus.PAID.value, "paid_at": paid_at})
        self._store.set(key, doc)
        return True


class KVProfileRepository(ProfileRepository):
    PREFIX = "profile:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _to_model(doc: dict) -> Profile:
        return Profile(
            profile_id=int(doc["id"]),
            full_name=doc.get("full_name"),
            email=doc.get("email"),
            password_hash=doc.get("password_hash") or "",
            role=Role(doc["role"]),
            avatar_url=doc.get("avatar_url"),
            created_at=_as_datetime(doc.get("created_at")),
        )

    def add(self, *, full_name: str, email: str, password: str, role: Role) -> int:
        profile_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{profile_id}",
            {
                "id": profile_id,
                "full_name": full_name,
                "email": email.lower(),
                "password_hash": generate_password_hash(password),
                "role": role.value,
                "created_at": now_local(),
            },
        )
        return profile_id

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        doc = self._store.get(f"{self.PREFIX}{int(profile_id)}")
        return self._to_model(doc) if doc else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        for doc in self._store.get_by_prefix(self.PREFIX):
            if (doc.get("email") or "").lower() == (email or "").lower():
                return self._to_model(doc)
        return None

    def list_all(self) -> Sequence[Profile]:
        docs = self._store.get_by_prefix(self.PREFIX)
        docs.sort(key=lambda d: int(d["id"]), reverse=True)
        return [self._to_model(d) for d in docs]

    def set_role(self, profile_id: int, role: Role) -> bool:
        key = f"{self.PREFIX}{int(profile_id)}"
        doc = self._store.get(key)
        if not doc:
            return False
        doc["role"] = role.value
        self._store.set(key, doc)
        return True


class KVAssignmentRepository(AssignmentRepository):
    PREFIX = "assignment:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _to_model(doc: dict) -> Assignment:
        return Assignment(
            assignment_id=int(doc["id"]),
            class_id=int(doc["class_id"]),
            title=doc["title"],
            description=doc.get("description"),
            due_date=_as_date(doc.get("due_date")),
            created_at=_as_datetime(doc.get("created_at")),
        )

    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        docs = [d for d in self._store.get_by_prefix(self.PREFIX) if int(d["class_id"]) == int(class_id)]
        docs.sort(key=lambda d: int(d["id"]), reverse=True)
        return [self._to_model(d) for d in docs]

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        doc = self._store.get(f"{self.PREFIX}{int(assignment_id)}")
        return self._to_model(doc) if doc else None

    def create(self, *, class_id: int, title: str, description: Optional[str], due_date: Optional[date]) -> int:
        assignment_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{assignment_id}",
            {
                "id": assignment_id,
                "class_id": int(class_id),
                "title": title,
                "description": description,
                "due_date": due_date,
                "created_at": now_local(),
            },
        )
        return assignment_id

    def update(
        self,
        *,
        assignment_id: int,
        title: str,
        description: Optional[str],
        due_date: Optional[date],
    ) -> bool:
        key = f"{self.PREFIX}{int(assignment_id)}"
        doc = self._store.get(key)
        if not doc:
            return False
        doc.update({"title": title, "description": description, "due_date": due_date})
        self._store.set(key, doc)
        return True

    def delete(self, assignment_id: int) -> bool:
        return self._store.delete(f"{self.PREFIX}{int(assignment_id)}")


class KVVocabularyRepository(VocabularyRepository):
    PREFIX = "vocabulary:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _to_model(doc: dict) -> VocabularyList:
        return VocabularyList(
            list_id=int(doc["id"]),
            class_id=int(doc["class_id"]),
            week=doc["week"],
            words=words_from_dicts(doc.get("words")),
            created_at=_as_datetime(doc.get("created_at")),
        )

    def list_for_class(self, class_id: int) -> Sequence[VocabularyList]:
        docs = [d for d in self._store.get_by_prefix(self.PREFIX) if int(d["class_id"]) == int(class_id)]
        docs.sort(key=lambda d: int(d["id"]), reverse=True)
        return [self._to_model(d) for d in docs]

    def get_by_id(self, list_id: int) -> Optional[VocabularyList]:
        doc = self._store.get(f"{self.PREFIX}{int(list_id)}")
        return self._to_model(doc) if doc else None

    def create(self, *, class_id: int, week: str, words: Sequence[VocabularyWord]) -> int:
        list_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{list_id}",
            {
                "id": list_id,
                "class_id": int(class_id),
                "week": week,
                "words": [w.to_dict() for w in words],
                "created_at": now_local(),
            },
        )
        return list_id

    def update(self, *, list_id: int, week: str, words: Sequence[VocabularyWord]) -> bool:
        key = f"{self.PREFIX}{int(list_id)}"
        doc = self._store.get(key)
        if not doc:
            return False
        doc.update({"week": week, "words": [w.to_dict() for w in words]})
        self._store.set(key, doc)
        return True

    def delete(self, list_id: int) -> bool:
        return self._store.delete(f"{self.PREFIX}{int(list_id)}")


class KVQuizRepository(QuizRepository):
    """Quizzes, questions and attempts live under three prefixes."""

    PREFIX = "quiz:"
    QUESTION_PREFIX = "quiz_question:"
    ATTEMPT_PREFIX = "quiz_attempt:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _to_model(doc: dict) -> Quiz:
        return Quiz(
            quiz_id=int(doc["id"]),
            class_id=int(doc["class_id"]),
            title=doc["title"],
            description=doc.get("description"),
            time_limit_minutes=doc.get("time_limit_minutes"),
            is_published=bool(doc.get("is_published")),
            created_at=_as_datetime(doc.get("created_at")),
        )

    @staticmethod
    def _to_question(doc: dict) -> QuizQuestion:
        return QuizQuestion(
            question_id=int(doc["id"]),
            quiz_id=int(doc["quiz_id"]),
            question_text=doc["question_text"],
            question_type=QuestionType(doc["question_type"]),
            options=tuple(doc.get("options") or ()),
            correct_answer=doc.get("correct_answer"),
            points=int(doc.get("points") or 1),
            order_index=int(doc.get("order_index") or 0),
        )

    def _to_attempt(self, doc: dict) -> QuizAttempt:
        student = self._store.get(f"{KVStudentRepository.PREFIX}{int(doc['student_id'])}")
        return QuizAttempt(
            attempt_id=int(doc["id"]),
            quiz_id=int(doc["quiz_id"]),
            student_id=int(doc["student_id"]),
            score=int(doc["score"]),
            answers=dict(doc.get("answers") or {}),
            started_at=_as_datetime(doc.get("started_at")),
            completed_at=_as_datetime(doc.get("completed_at")),
            student_name=student["name"] if student else None,
        )

    def list_for_class(self, class_id: int, *, published_only: bool = False) -> Sequence[Quiz]:
        docs = [d for d in self._store.get_by_prefix(self.PREFIX) if int(d["class_id"]) == int(class_id)]
        if published_only:
            docs = [d for d in docs if d.get("is_published")]
        docs.sort(key=lambda d: int(d["id"]), reverse=True)
        return [self._to_model(d) for d in docs]

    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        doc = self._store.get(f"{self.PREFIX}{int(quiz_id)}")
        return self._to_model(doc) if doc else None

    def create(
        self,
        *,
        class_id: int,
        title: str,
        description: Optional[str],
        time_limit_minutes: Optional[int],
    ) -> int:
        quiz_id = self._store.next_id(self.PREFIX)
        self._store.set(
            f"{self.PREFIX}{quiz_id}",
            {
                "id": quiz_id,
                "class_id": int(class_id),
                "title": title,
                "description": description,
                "time_limit_minutes": time_limit_minutes,
                "is_published": False,
                "created_at": now_local(),
            },
        )
        return quiz_id

    def _patch(self, key: str, **changes) -> bool:
        doc = self._store.get(key)
        if not doc:
            return False
        doc.update(changes)
        self._store.set(key, doc)
        return True

    def update(
        self,
        *,
        quiz_id: int,
        title: str,
        description: Optional[str],
        time_limit_minutes: Optional[int],
    ) -> bool:
        return self._patch(
            f"{self.PREFIX}{int(quiz_id)}",
            title=title,
            description=description,
            time_limit_minutes=time_limit_minutes,
        )

    def set_published(self, quiz_id: int, published: bool) -> bool:
        return self._patch(f"{self.PREFIX}{int(quiz_id)}", is_published=bool(published))

    def delete(self, quiz_id: int) -> bool:
        if not self._store.delete(f"{self.PREFIX}{int(quiz_id)}"):
            return False
        delete_quiz_dependents(self._store, int(quiz_id))
        return True

    def list_questions(self, quiz_id: int) -> Sequence[QuizQuestion]:
        docs = [d for d in self._store.get_by_prefix(self.QUESTION_PREFIX) if int(d["quiz_id"]) == int(quiz_id)]
        docs.sort(key=lambda d: (int(d.get("order_index") or 0), int(d["id"])))
        return [self._to_question(d) for d in docs]

    def get_question(self, question_id: int) -> Optional[QuizQuestion]:
        doc = self._store.get(f"{self.QUESTION_PREFIX}{int(question_id)}")
        return self._to_question(doc) if doc else None

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
        question_id = self._store.next_id(self.QUESTION_PREFIX)
        self._store.set(
            f"{self.QUESTION_PREFIX}{question_id}",
            {
                "id": question_id,
                "quiz_id": int(quiz_id),
                "question_text": question_text,
                "question_type": question_type.value,
                "options": list(options),
                "correct_answer": correct_answer,
                "points": int(points),
                "order_index": int(order_index),
            },
        )
        return question_id

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
        return self._patch(
            f"{self.QUESTION_PREFIX}{int(question_id)}",
            question_text=question_text,
            question_type=question_type.value,
            options=list(options),
            correct_answer=correct_answer,
            points=int(points),
        )

    def delete_question(self, question_id: int) -> bool:
        return self._store.delete(f"{self.QUESTION_PREFIX}{int(question_id)}")

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
        attempt_id = self._store.next_id(self.ATTEMPT_PREFIX)
        self._store.set(
            f"{self.ATTEMPT_PREFIX}{attempt_id}",
            {
                "id": attempt_id,
                "quiz_id": int(quiz_id),
                "student_id": int(student_id),
                "score": int(score),
                "answers": dict(answers),
                "started_at": started_at,
                "completed_at": completed_at,
            },
        )
        return attempt_id

    def list_attempts(self, quiz_id: int) -> Sequence[QuizAttempt]:
        docs = [d for d in self._store.get_by_prefix(self.ATTEMPT_PREFIX) if int(d["quiz_id"]) == int(quiz_id)]
        attempts = [self._to_attempt(d) for d in docs]
        attempts.sort(key=lambda a: (a.completed_at or datetime.min, a.attempt_id), reverse=True)
        return attempts
