from __future__ import annotations

from datetime import datetime

import pytest

from src.classroom_manager.classroom_manager.core.constants import DEFAULT_QUESTION_OPTIONS, TRUE_FALSE_OPTIONS
from src.classroom_manager.classroom_manager.core.enums import QuestionType
from src.classroom_manager.classroom_manager.core.exceptions import NotFoundError, ValidationError

NOW = datetime(2026, 1, 13, 9, 30)


@pytest.fixture()
def quiz(container):
    class_id = container.class_service.create_class(name="IELTS A")
    student_id = container.student_service.add_student(class_id=class_id, name="An")
    quiz_id = container.quiz_service.create_quiz(class_id=class_id, title="Unit 1")
    return class_id, student_id, quiz_id


def test_new_quiz_is_draft_with_default_time_limit(container, quiz):
    class_id, _, quiz_id = quiz
    q = container.quiz_service.get(quiz_id)

    assert (q.is_published, q.time_limit_minutes) == (False, 15)
    assert container.quiz_service.list_for_class(class_id, published_only=True) == []
    assert container.quiz_service.toggle_publish(quiz_id) is True
    assert [x.quiz_id for x in container.quiz_service.list_for_class(class_id, published_only=True)] == [quiz_id]


def test_quiz_validation(container, quiz):
    class_id, _, quiz_id = quiz
    svc = container.quiz_service

    with pytest.raises(ValidationError):
        svc.create_quiz(class_id=class_id, title="  ")
    with pytest.raises(ValidationError):
        svc.update_quiz(quiz_id=quiz_id, title="Unit 1", time_limit_minutes=0)
    with pytest.raises(NotFoundError):
        svc.create_quiz(class_id=999, title="Unit 9")
    with pytest.raises(NotFoundError):
        svc.get(999)


def test_question_defaults_follow_type(container, quiz):
    _, _, quiz_id = quiz
    svc = container.quiz_service

    svc.add_question(quiz_id=quiz_id)
    svc.add_question(quiz_id=quiz_id, question_text="Sky is blue", question_type="true_false")
    svc.add_question(quiz_id=quiz_id, question_text="Spell 'cat'", question_type="text", correct_answer="cat")

    mc, tf, text = svc.questions(quiz_id)
    assert (mc.options, mc.correct_answer, mc.order_index) == (DEFAULT_QUESTION_OPTIONS, DEFAULT_QUESTION_OPTIONS[0], 0)
    assert (tf.question_type, tf.options, tf.correct_answer) == (QuestionType.TRUE_FALSE, TRUE_FALSE_OPTIONS, "Đúng")
    assert (text.options, text.correct_answer, text.order_index) == ((), "cat", 2)


@pytest.mark.parametrize(
    "fields",
    [
        {"question_type": "essay"},
        {"options": "A,B"},
        {"options": ["only one"]},
        {"options": ["A", "B"], "correct_answer": "C"},
        {"points": 0},
    ],
)
def test_question_rejects_bad_input(container, quiz, fields):
    _, _, quiz_id = quiz
    with pytest.raises(ValidationError):
        container.quiz_service.add_question(quiz_id=quiz_id, **fields)


def test_update_and_delete_question(container, quiz):
    _, _, quiz_id = quiz
    svc = container.quiz_service
    qid = svc.add_question(quiz_id=quiz_id)

    svc.update_question(question_id=qid, question_text="2 + 2 = ?", options=["3", "4"], correct_answer="4", points=3)
    q = svc.questions(quiz_id)[0]
    assert (q.question_text, q.correct_answer, q.points) == ("2 + 2 = ?", "4", 3)

    svc.delete_question(qid)
    assert svc.questions(quiz_id) == []
    with pytest.raises(NotFoundError):
        svc.update_question(question_id=qid, question_text="x")


def test_attempt_scores_matching_answers(container, quiz):
    _, student_id, quiz_id = quiz
    svc = container.quiz_service
    q1 = svc.add_question(quiz_id=quiz_id, question_text="2 + 2", options=["3", "4"], correct_answer="4", points=2)
    q2 = svc.add_question(quiz_id=quiz_id, question_text="Spell", question_type="text", correct_answer="cat")
    svc.toggle_publish(quiz_id)

    attempt = svc.submit_attempt(quiz_id=quiz_id, student_id=student_id, answers={q1: "4", q2: "Cat"}, now=NOW)

    assert attempt.score == 2
    assert attempt.answers == {str(q1): "4", str(q2): "Cat"}
    assert attempt.completed_at == NOW


def test_attempt_requires_published_quiz_with_questions(container, quiz):
    _, student_id, quiz_id = quiz
    svc = container.quiz_service

    with pytest.raises(ValidationError):
        svc.submit_attempt(quiz_id=quiz_id, student_id=student_id, answers={})

    svc.toggle_publish(quiz_id)
    with pytest.raises(ValidationError):
        svc.submit_attempt(quiz_id=quiz_id, student_id=student_id, answers={})


def test_attempt_rejects_students_of_other_classes(container, quiz):
    _, _, quiz_id = quiz
    svc = container.quiz_service
    svc.add_question(quiz_id=quiz_id)
    svc.toggle_publish(quiz_id)
    other = container.class_service.create_class(name="Khác")
    outsider = container.student_service.add_student(class_id=other, name="Người ngoài")

    with pytest.raises(ValidationError):
        svc.submit_attempt(quiz_id=quiz_id, student_id=outsider, answers={})
    with pytest.raises(NotFoundError):
        svc.submit_attempt(quiz_id=quiz_id, student_id=999, answers={})
    with pytest.raises(ValidationError):
        svc.submit_attempt(quiz_id=quiz_id, student_id=0, answers={})


def test_results_summarise_attempts(container, quiz):
    class_id, an, quiz_id = quiz
    binh = container.student_service.add_student(class_id=class_id, name="Bình")
    svc = container.quiz_service
    q1 = svc.add_question(quiz_id=quiz_id, options=["A", "B"], correct_answer="A", points=2)
    q2 = svc.add_question(quiz_id=quiz_id, options=["A", "B"], correct_answer="B")
    svc.toggle_publish(quiz_id)

    svc.submit_attempt(quiz_id=quiz_id, student_id=an, answers={q1: "A", q2: "B"}, now=NOW)
    svc.submit_attempt(quiz_id=quiz_id, student_id=binh, answers={q1: "B"}, now=datetime(2026, 1, 13, 10, 0))

    results = svc.results(quiz_id).to_dict()
    assert (results["max_score"], results["question_count"], results["attempt_count"]) == (3, 2, 2)
    assert results["average_score"] == 1.5
    assert [(a["student_name"], a["score"]) for a in results["attempts"]] == [("Bình", 0), ("An", 3)]
