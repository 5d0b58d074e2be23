from __future__ import annotations

import threading
from datetime import date, datetime

from src.classroom_manager.classroom_manager.attendance.model import AttendanceMark
from src.classroom_manager.classroom_manager.core.enums import AttendanceStatus
from src.classroom_manager.classroom_manager.kv.repositories import (
    KVAttendanceRepository,
    KVClassRepository,
    KVQuizRepository,
    KVStudentRepository,
    KVTuitionRepository,
)
from src.classroom_manager.classroom_manager.kv.store import InMemoryKeyValueStore


def test_store_returns_copies_and_scans_prefix():
    store = InMemoryKeyValueStore()
    store.set("class:1", {"id": 1, "name": "A", "on": date(2026, 1, 1)})
    store.set("class:2", {"id": 2, "name": "B"})
    store.set("student:1", {"id": 1})

    doc = store.get("class:1")
    doc["name"] = "changed"

    assert store.get("class:1")["name"] == "A"
    assert store.get("class:1")["on"] == "2026-01-01"
    assert [d["id"] for d in store.get_by_prefix("class:")] == [1, 2]
    assert store.delete("class:2") is True
    assert store.delete("class:2") is False
    assert store.get("missing") is None


def test_ids_are_per_prefix():
    store = InMemoryKeyValueStore()
    assert [store.next_id("class:"), store.next_id("class:"), store.next_id("student:")] == [1, 2, 1]


def test_class_repository_roundtrip():
    repo = KVClassRepository(InMemoryKeyValueStore())
    cid = repo.create(name="IELTS A", schedule="T2/T4 - 08:00", level="5.5")

    assert repo.update(class_id=cid, name="IELTS A+", schedule=None, level=None) is True
    assert repo.get_by_id(cid).name == "IELTS A+"
    assert repo.update(class_id=99, name="x", schedule=None, level=None) is False
    assert [c.class_id for c in repo.list_all()] == [cid]


def test_attendance_upsert_keeps_one_row_per_student_and_day():
    store = InMemoryKeyValueStore()
    repo = KVAttendanceRepository(store)
    day = date(2026, 1, 13)

    repo.upsert_many(class_id=1, on=day, marks=[AttendanceMark(5, AttendanceStatus.ABSENT)])
    repo.upsert_many(class_id=1, on=day, marks=[AttendanceMark(5, AttendanceStatus.PRESENT)])
    repo.upsert_many(class_id=1, on=date(2026, 1, 15), marks=[AttendanceMark(5, AttendanceStatus.LATE)])

    rows = repo.list_for_class_on_date(1, day)
    assert [(r.student_id, r.status) for r in rows] == [(5, AttendanceStatus.PRESENT)]
    assert repo.count_for_class_on_date(1, day) == 1
    assert repo.count_for_class_on_date(2, day) == 0
    assert len(repo.list_in_range(start=day, end=date(2026, 1, 31))) == 2


def test_tuition_rows_carry_student_and_class_names():
    store = InMemoryKeyValueStore()
    cid = KVClassRepository(store).create(name="IELTS A", schedule=None, level=None)
    sid = KVStudentRepository(store).create(class_id=cid, name="An")
    tuitions = KVTuitionRepository(store)
    tid = tuitions.create(class_id=cid, student_id=sid, amount=500000, period="Tháng 1/2026", due_date=date(2026, 1, 10))

    t = tuitions.get_by_id(tid)
    assert (t.student_name, t.class_name) == ("An", "IELTS A")
    assert tuitions.list_overdue(date(2026, 1, 9)) == []
    assert [o.tuition_id for o in tuitions.list_overdue(date(2026, 1, 10))] == [tid]


def test_concurrent_writers_keep_every_document():
    store = InMemoryKeyValueStore()

    def writer(n: int):
        for i in range(200):
            store.set(f"student:{n}-{i}", {"id": i, "n": n})
            store.get_by_prefix("student:")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.get_by_prefix("student:")) == 800


def test_deleting_class_removes_its_students_and_their_records(container, kv_store):
    class_id = container.class_service.create_class(name="Giao tiếp")
    student_id = container.student_service.add_student(class_id=class_id, name="An")
    container.attendance_service.save(class_id, date(2026, 1, 12), {student_id: "present"})
    container.tuition_service.create_tuition(student_id=student_id, amount=500000, due_date=date(2026, 1, 10))
    container.assignment_service.create_assignment(class_id=class_id, title="Essay 1")
    container.vocabulary_service.create_list(class_id=class_id, week="Tuần 1", words=[{"word": "apple"}])
    quiz_id = container.quiz_service.create_quiz(class_id=class_id, title="Quiz 1")
    container.quiz_service.add_question(quiz_id=quiz_id)

    container.class_service.delete_class(class_id)

    assert container.orchestration_service.overview(datetime(2026, 1, 13, 9, 0)).alerts == []
    assert container.students_repo.get_by_id(student_id) is None
    assert container.tuitions_repo.list_all() == []
    for prefix in ("attendance:", "assignment:", "vocabulary:", "quiz:", "quiz_question:"):
        assert kv_store.get_by_prefix(prefix) == []


def test_deleting_student_removes_attendance_and_tuitions(container, kv_store):
    class_id = container.class_service.create_class(name="IELTS A")
    an = container.student_service.add_student(class_id=class_id, name="An")
    binh = container.student_service.add_student(class_id=class_id, name="Bình")
    container.attendance_service.save(class_id, date(2026, 1, 12), {an: "late", binh: "present"})
    container.tuition_service.create_tuition(student_id=an, amount=500000, due_date=date(2026, 1, 10))

    container.student_service.remove_student(an)

    assert [r.student_id for r in container.attendance_repo.list_for_class_on_date(class_id, date(2026, 1, 12))] == [
        binh
    ]
    assert container.tuition_service.list_overdue(date(2026, 1, 20)) == []


def test_quiz_delete_drops_questions_and_attempts():
    store = InMemoryKeyValueStore()
    cid = KVClassRepository(store).create(name="IELTS A", schedule=None, level=None)
    sid = KVStudentRepository(store).create(class_id=cid, name="An")
    quizzes = KVQuizRepository(store)
    qid = quizzes.create(class_id=cid, title="Quiz", description=None, time_limit_minutes=15)
    quizzes.create_attempt(
        quiz_id=qid,
        student_id=sid,
        score=1,
        answers={"1": "A"},
        started_at=None,
        completed_at=datetime(2026, 1, 13, 9, 0),
    )

    assert [a.student_name for a in quizzes.list_attempts(qid)] == ["An"]
    assert quizzes.delete(qid) is True
    assert quizzes.delete(qid) is False
    assert store.get_by_prefix(KVQuizRepository.ATTEMPT_PREFIX) == []
