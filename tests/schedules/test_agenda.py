from __future__ import annotations

from datetime import datetime

from src.classroom_manager.classroom_manager.classes.model import ClassRecord
from src.classroom_manager.classroom_manager.schedules.agenda import AgendaCalculator


def test_today_lists_only_classes_meeting_today():
    classes = [
        ClassRecord(class_id=1, name="IELTS A", schedule="T2/T4 - 08:00"),
        ClassRecord(class_id=2, name="Giao tiếp", schedule="T3/T5 - 19:00"),
    ]
    items = AgendaCalculator().today(classes, datetime(2026, 1, 13, 7, 0))

    assert [(i.class_id, i.time, i.day_code) for i in items] == [(2, "19:00", "T3")]


def test_sunday_maps_to_cn():
    classes = [ClassRecord(class_id=3, name="Thiếu nhi", schedule="T7,CN - 09:30")]
    items = AgendaCalculator().today(classes, datetime(2026, 1, 18, 7, 0))

    assert len(items) == 1
    assert items[0].day_code == "CN"


def test_repeated_day_gives_single_item():
    classes = [ClassRecord(class_id=1, name="IELTS A", schedule="T2/T2 - 08:00")]
    assert len(AgendaCalculator().today(classes, datetime(2026, 1, 12, 7, 0))) == 1


def test_due_once_inside_buffer():
    agenda = AgendaCalculator(buffer_minutes=15)

    assert agenda.is_due("19:00", datetime(2026, 1, 13, 18, 44)) is False
    assert agenda.is_due("19:00", datetime(2026, 1, 13, 18, 45)) is True
    assert agenda.is_due("19:00", datetime(2026, 1, 13, 21, 0)) is True


def test_unreadable_time_is_never_due():
    agenda = AgendaCalculator()
    assert agenda.is_due("buổi tối", datetime(2026, 1, 13, 23, 59)) is False


def test_custom_buffer():
    agenda = AgendaCalculator(buffer_minutes=0)

    assert agenda.buffer_minutes == 0
    assert agenda.is_due("08:00", datetime(2026, 1, 12, 7, 59)) is False
    assert agenda.is_due("08:00", datetime(2026, 1, 12, 8, 0)) is True
