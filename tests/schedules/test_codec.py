from __future__ import annotations

import pytest

from src.classroom_manager.classroom_manager.schedules.codec import (
    canonical_order,
    format_schedule,
    parse_schedule,
    split_schedule,
    toggle_day,
)
from src.classroom_manager.classroom_manager.schedules.model import ScheduleSlot


@pytest.mark.parametrize("value", [None, "", "Lịch linh hoạt", "T2 T4 19:00"])
def test_parse_unreadable_schedule_yields_no_slots(value):
    assert parse_schedule(value) == []


def test_parse_slash_separated_days():
    assert parse_schedule("T2/T4 - 19:00") == [
        ScheduleSlot(day_code="T2", time="19:00"),
        ScheduleSlot(day_code="T4", time="19:00"),
    ]


def test_parse_comma_separated_days_and_extra_spaces():
    slots = parse_schedule("  T3, T5  -  18:30 ")
    assert [(s.day_code, s.time) for s in slots] == [("T3", "18:30"), ("T5", "18:30")]


def test_parse_splits_on_first_dash_only():
    slots = parse_schedule("CN - 08:00-10:00")
    assert slots == [ScheduleSlot(day_code="CN", time="08:00-10:00")]


def test_format_variants():
    assert format_schedule(["T2", "T4"], "19:00") == "T2/T4 - 19:00"
    assert format_schedule(["T2", "T4"], None) == "T2/T4"
    assert format_schedule([], "19:00") == "- 19:00"
    assert format_schedule([], "  ") == ""


def test_formatted_schedule_parses_back_to_same_slots():
    slots = parse_schedule(format_schedule(["T2", "T6"], "07:30"))
    assert [(s.day_code, s.time) for s in slots] == [("T2", "07:30"), ("T6", "07:30")]


def test_toggle_day_keeps_week_order():
    assert toggle_day(["T4"], "T2") == ["T2", "T4"]
    assert toggle_day(["T2", "T4"], "T2") == ["T4"]
    assert toggle_day(["T7"], "CN") == ["T7", "CN"]


def test_canonical_order_dedupes_and_puts_unknown_last():
    assert canonical_order(["CN", "T3", "X", "T3"]) == ["T3", "CN", "X"]


def test_split_schedule_prefills_picker():
    assert split_schedule("T4/T2 - 08:00") == (["T2", "T4"], "08:00")
    assert split_schedule("Thứ 2 - 08:00") == ([], "08:00")
    assert split_schedule(None) == ([], "")
