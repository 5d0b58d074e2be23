from __future__ import annotations

from datetime import date

import pytest

from src.classroom_manager.classroom_manager.core.enums import AttendanceStatus
from src.classroom_manager.classroom_manager.core.exceptions import NotFoundError, ValidationError

DAY = date(2026, 1, 13)


@pytest.fixture()
def class_with_students(container):
    class_id = container.class_service.create_class(name="Giao tiếp", days=["T3"], time="19:00")
    a = container.student_service.add_student(class_id=class_id, name="An")
    b = container.student_service.add_student(class_id=class_id, name="Bình")
    return class_id, a, b


def test_sheet_defaults_to_present(container, class_with_students):
    class_id, a, b = class_with_students
    rows = container.attendance_service.sheet(class_id, DAY)

    assert [(r.student_name, r.status, r.recorded) for r in rows] == [
        ("An", AttendanceStatus.PRESENT, False),
        ("Bình", AttendanceStatus.PRESENT, False),
    ]


def test_save_then_resave_overwrites(container, class_with_students):
    class_id, a, b = class_with_students
    svc = container.attendance_service

    assert svc.save(class_id, DAY, {a: "absent", b: "present"}) == 2
    svc.save(class_id, DAY, {a: "late", b: "present"})

    rows = {r.student_id: r for r in svc.sheet(class_id, DAY)}
    assert rows[a].status == AttendanceStatus.LATE
    assert rows[a].recorded is True
    assert svc.count_for_class_on_date(class_id, DAY) == 2


def test_save_rejects_unknown_status(container, class_with_students):
    class_id, a, _ = class_with_students
    with pytest.raises(ValidationError):
        container.attendance_service.save(class_id, DAY, {a: "sick"})


def test_save_rejects_non_numeric_student_id(container, class_with_students):
    class_id, _, _ = class_with_students
    with pytest.raises(ValidationError):
        container.attendance_service.save(class_id, DAY, {"abc": "present"})


def test_save_rejects_students_of_other_classes(container, class_with_students):
    class_id, _, _ = class_with_students
    other = container.class_service.create_class(name="Khác")
    outsider = container.student_service.add_student(class_id=other, name="Người ngoài")

    with pytest.raises(ValidationError):
        container.attendance_service.save(class_id, DAY, {outsider: "present"})


def test_save_empty_sheet(container, class_with_students):
    class_id, _, _ = class_with_students
    with pytest.raises(ValidationError):
        container.attendance_service.save(class_id, DAY, {})


def test_unknown_class(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.sheet(99, DAY)


def test_attendance_clears_dashboard_alert(container, class_with_students):
    from datetime import datetime

    class_id, a, b = class_with_students
    now = datetime(2026, 1, 13, 19, 10)

    before = container.orchestration_service.overview(now)
    assert [x.id for x in before.alerts] == [f"attendance-{class_id}"]

    container.attendance_service.save(class_id, DAY, {a: "present", b: "absent"})
    assert container.orchestration_service.overview(now).alerts == []
