from __future__ import annotations

from datetime import date

from src.classroom_manager.classroom_manager.classes.model import ClassRecord
from src.classroom_manager.classroom_manager.schedules.service import ScheduleService


class InMemoryClasses:
    def __init__(self, classes):
        self._classes = list(classes)

    def list_all(self):
        return list(self._classes)


class BrokenClasses:
    def list_all(self):
        raise RuntimeError("database is down")


def test_calendar_week_payload():
    svc = ScheduleService(InMemoryClasses([ClassRecord(class_id=1, name="IELTS A", schedule="T2/T4 - 08:00")]))
    week = svc.calendar_week(date(2026, 1, 14), today=date(2026, 1, 14)).to_dict()

    assert week["start"] == "2026-01-12"
    assert week["end"] == "2026-01-18"
    assert week["prev"] == "2026-01-05"
    assert week["next"] == "2026-01-19"
    assert [d["is_today"] for d in week["days"]].index(True) == 2
    assert week["days"][0]["occurrences"][0]["name"] == "IELTS A"


def test_calendar_week_renders_empty_when_classes_unavailable():
    week = ScheduleService(BrokenClasses()).calendar_week(date(2026, 1, 14), today=date(2026, 1, 14))

    assert len(week.cells) == 7
    assert all(not c.occurrences for c in week.cells)
