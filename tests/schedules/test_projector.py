from __future__ import annotations

from datetime import date, timedelta

from src.classroom_manager.classroom_manager.classes.model import ClassRecord
from src.classroom_manager.classroom_manager.schedules.projector import WeekProjector, day_code_for


def _cls(class_id: int, name: str, schedule):
    return ClassRecord(class_id=class_id, name=name, schedule=schedule)


def test_day_codes_follow_monday_first_week():
    monday = date(2026, 1, 12)
    codes = [day_code_for(monday + timedelta(days=i)) for i in range(7)]
    assert codes == ["T2", "T3", "T4", "T5", "T6", "T7", "CN"]


def test_week_has_seven_consecutive_days_starting_monday():
    cells = WeekProjector().project(date(2026, 1, 14), [])

    assert len(cells) == 7
    assert cells[0].date == date(2026, 1, 12)
    assert cells[-1].date == date(2026, 1, 18)
    assert (cells[-1].date - cells[0].date).days == 6
    assert all(not c.occurrences for c in cells)


def test_class_appears_on_each_scheduled_day():
    cells = WeekProjector().project(date(2026, 1, 14), [_cls(1, "IELTS A", "T2/T4 - 08:00")])

    by_code = {c.day_code: c for c in cells}
    assert [o.class_name for o in by_code["T2"].occurrences] == ["IELTS A"]
    assert [o.class_name for o in by_code["T4"].occurrences] == ["IELTS A"]
    assert by_code["T4"].date == date(2026, 1, 14)
    for code in ("T3", "T5", "T6", "T7", "CN"):
        assert by_code[code].occurrences == ()


def test_thursday_class_lands_on_thursday():
    cells = WeekProjector().project(date(2026, 1, 18), [_cls(2, "Giao tiếp", "T5 - 19:00")])

    thursday = cells[3]
    assert thursday.date == date(2026, 1, 15)
    assert thursday.occurrences[0].time == "19:00"


def test_occurrences_sorted_by_time_and_bad_schedules_ignored():
    classes = [
        _cls(1, "Tối", "T2 - 19:00"),
        _cls(2, "Sáng", "T2 - 08:00"),
        _cls(3, "Chưa xếp lịch", None),
        _cls(4, "Ghi chú", "linh hoạt"),
    ]
    cells = WeekProjector().project(date(2026, 1, 12), classes)

    assert [o.class_name for o in cells[0].occurrences] == ["Sáng", "Tối"]
    assert sum(len(c.occurrences) for c in cells) == 2
