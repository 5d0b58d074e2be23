from __future__ import annotations

from datetime import date, datetime

from src.classroom_manager.classroom_manager.alerts.engine import AlertEngine
from src.classroom_manager.classroom_manager.alerts.rules.base import AlertRule
from src.classroom_manager.classroom_manager.core.enums import AlertKind, AlertSeverity
from src.classroom_manager.classroom_manager.schedules.agenda import AgendaItem
from src.classroom_manager.classroom_manager.tuition.model import OverdueTuition

NOW = datetime(2026, 1, 13, 19, 30)


def _item(class_id: int, name: str, time: str) -> AgendaItem:
    return AgendaItem(class_id=class_id, class_name=name, level=None, time=time, day_code="T3")


def _overdue(n: int) -> list[OverdueTuition]:
    return [
        OverdueTuition(
            tuition_id=i,
            student_name=f"HV {i}",
            class_name="IELTS A",
            amount=500000,
            period="Tháng 1/2026",
            due_date=date(2026, 1, 10),
        )
        for i in range(1, n + 1)
    ]


def _no_attendance(class_id: int, on: date):
    return 0


def test_missing_attendance_alert_for_due_class():
    alerts = AlertEngine().compute_alerts([_item(7, "Giao tiếp", "19:00")], _no_attendance, [], now=NOW)

    assert len(alerts) == 1
    a = alerts[0]
    assert a.id == "attendance-7"
    assert a.kind == AlertKind.MISSING_ATTENDANCE
    assert a.severity == AlertSeverity.HIGH
    assert a.title == "Chưa điểm danh: Giao tiếp"
    assert a.description == "Lớp lúc 19:00 hôm nay chưa có dữ liệu điểm danh."
    assert a.target_class_id == 7


def test_class_not_yet_due_gives_no_alert():
    alerts = AlertEngine().compute_alerts([_item(1, "Tối muộn", "21:00")], _no_attendance, [], now=NOW)
    assert alerts == []


def test_recorded_attendance_clears_alert():
    alerts = AlertEngine().compute_alerts([_item(1, "Giao tiếp", "19:00")], lambda cid, on: 12, [], now=NOW)
    assert alerts == []


def test_unknown_attendance_count_counts_as_missing():
    alerts = AlertEngine().compute_alerts([_item(1, "Giao tiếp", "19:00")], lambda cid, on: None, [], now=NOW)
    assert [a.id for a in alerts] == ["attendance-1"]


def test_overdue_tuitions_aggregate_into_one_alert():
    alerts = AlertEngine().compute_alerts([], _no_attendance, _overdue(5), now=NOW)

    assert len(alerts) == 1
    assert alerts[0].id == "tuition-overdue"
    assert alerts[0].severity == AlertSeverity.MEDIUM
    assert alerts[0].title == "5 Học phí quá hạn"
    assert alerts[0].description == "Có 5 phiếu thu đã đến hạn nhưng chưa thanh toán."
    assert alerts[0].target_class_id is None


def test_failed_lookup_skips_only_that_class():
    def lookup(class_id: int, on: date):
        if class_id == 1:
            raise RuntimeError("timeout")
        return 0

    items = [_item(1, "Lỗi", "08:00"), _item(2, "Ổn", "09:00")]
    alerts = AlertEngine().compute_alerts(items, lookup, _overdue(2), now=NOW)

    assert [a.id for a in alerts] == ["attendance-2", "tuition-overdue"]


def test_attendance_alerts_come_before_tuition_alert_in_agenda_order():
    items = [_item(3, "C", "07:00"), _item(1, "A", "08:00")]
    alerts = AlertEngine().compute_alerts(items, _no_attendance, _overdue(1), now=NOW)

    assert [a.id for a in alerts] == ["attendance-3", "attendance-1", "tuition-overdue"]


def test_failing_rule_does_not_hide_other_rules():
    class Exploding(AlertRule):
        def evaluate(self, context):
            raise ValueError("boom")

    from src.classroom_manager.classroom_manager.alerts.rules.tuition_overdue import TuitionOverdueRule

    engine = AlertEngine([Exploding(), TuitionOverdueRule()])
    alerts = engine.compute_alerts([], _no_attendance, _overdue(3), now=NOW)

    assert [a.title for a in alerts] == ["3 Học phí quá hạn"]
