from __future__ import annotations

from datetime import date, datetime

from src.classroom_manager.classroom_manager.classes.model import ClassRecord
from src.classroom_manager.classroom_manager.dashboard.service import OrchestrationService
from src.classroom_manager.classroom_manager.schedules.agenda import AgendaCalculator
from src.classroom_manager.classroom_manager.tuition.model import OverdueTuition


class InMemoryClasses:
    def __init__(self, classes):
        self._classes = list(classes)

    def list_all(self):
        return list(self._classes)


class InMemoryAttendanceCounts:
    def __init__(self, counts: dict[tuple[int, date], int]):
        self._counts = counts

    def count_for_class_on_date(self, class_id: int, on: date) -> int:
        return self._counts.get((class_id, on), 0)


class InMemoryTuitions:
    def __init__(self, overdue):
        self._overdue = list(overdue)

    def list_overdue(self, as_of: date):
        return list(self._overdue)


class BrokenTuitions:
    def list_overdue(self, as_of: date):
        raise RuntimeError("connection reset")


TUESDAY_EVENING = datetime(2026, 1, 13, 19, 5)

CLASSES = [
    ClassRecord(class_id=1, name="IELTS A", schedule="T2/T4 - 08:00"),
    ClassRecord(class_id=2, name="Giao tiếp", schedule="T3/T5 - 19:00"),
    ClassRecord(class_id=3, name="Luyện đề", schedule="T3 - 20:00"),
]

OVERDUE = [
    OverdueTuition(
        tuition_id=1,
        student_name="Lê Hoàng Bảo",
        class_name="IELTS A",
        amount=500000,
        period="Tháng 1/2026",
        due_date=date(2026, 1, 10),
    )
]


def test_overview_agenda_and_alerts():
    svc = OrchestrationService(InMemoryClasses(CLASSES), InMemoryAttendanceCounts({}), InMemoryTuitions(OVERDUE))
    overview = svc.overview(TUESDAY_EVENING)

    assert overview.today == date(2026, 1, 13)
    assert [i.class_id for i in overview.agenda] == [2, 3]
    assert [a.id for a in overview.alerts] == ["attendance-2", "tuition-overdue"]


def test_overview_no_alert_when_attendance_taken():
    counts = InMemoryAttendanceCounts({(2, date(2026, 1, 13)): 8})
    svc = OrchestrationService(InMemoryClasses(CLASSES), counts, InMemoryTuitions([]))

    assert svc.overview(TUESDAY_EVENING).alerts == []


def test_overview_survives_tuition_failure():
    svc = OrchestrationService(InMemoryClasses(CLASSES), InMemoryAttendanceCounts({}), BrokenTuitions())
    overview = svc.overview(TUESDAY_EVENING)

    assert [a.id for a in overview.alerts] == ["attendance-2"]


def test_overview_dict_marks_due_items():
    svc = OrchestrationService(
        InMemoryClasses(CLASSES),
        InMemoryAttendanceCounts({}),
        InMemoryTuitions([]),
        agenda=AgendaCalculator(buffer_minutes=15),
    )
    payload = svc.overview(TUESDAY_EVENING).to_dict(svc.agenda)

    assert payload["today"] == "2026-01-13"
    assert payload["generated_at"] == "19:05"
    assert [(i["name"], i["due"]) for i in payload["agenda"]] == [("Giao tiếp", True), ("Luyện đề", False)]
    assert payload["alerts"][0]["kind"] == "missing-attendance"
