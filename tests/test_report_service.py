from __future__ import annotations

from datetime import date

from src.classroom_manager.classroom_manager.reports.service import percentage


def test_percentage():
    assert percentage(0, 0) == 0.0
    assert percentage(1, 3) == 33.3
    assert percentage(2, 2) == 100.0


def test_management_report(container):
    classes = container.class_service
    students = container.student_service
    tuitions = container.tuition_service
    attendance = container.attendance_service

    a = classes.create_class(name="IELTS A")
    b = classes.create_class(name="Giao tiếp")
    a1 = students.add_student(class_id=a, name="An")
    a2 = students.add_student(class_id=a, name="Bình")
    b1 = students.add_student(class_id=b, name="Chi")

    paid = tuitions.create_tuition(student_id=a1, amount=500000, period="Tháng 1/2026", due_date=date(2026, 1, 10))
    tuitions.mark_paid(paid)
    tuitions.create_tuition(student_id=a2, amount=500000, period="Tháng 1/2026", due_date=date(2026, 1, 10))
    tuitions.create_tuition(student_id=b1, amount=300000, period="Tháng 1/2026", due_date=date(2026, 1, 30))

    attendance.save(a, date(2026, 1, 12), {a1: "present", a2: "absent"})
    attendance.save(b, date(2026, 1, 13), {b1: "present"})
    attendance.save(b, date(2026, 2, 2), {b1: "absent"})

    report = container.report_service.build(
        start=date(2026, 1, 1), end=date(2026, 1, 31), as_of=date(2026, 1, 20)
    )

    by_class = {r["class_name"]: r for r in report.revenue}
    assert by_class["IELTS A"]["total_paid"] == 500000
    assert by_class["IELTS A"]["total_overdue"] == 500000
    assert by_class["IELTS A"]["student_count"] == 2
    assert by_class["Giao tiếp"]["total_pending"] == 300000

    assert [(r["class_name"], r["present_rate"]) for r in report.attendance] == [
        ("IELTS A", 50.0),
        ("Giao tiếp", 100.0),
    ]
    assert report.totals == {
        "total_expected": 1300000,
        "total_paid": 500000,
        "total_overdue": 500000,
        "collection_rate": 38.5,
        "average_present_rate": 66.7,
    }


def test_report_period_filter(container):
    a = container.class_service.create_class(name="IELTS A")
    s = container.student_service.add_student(class_id=a, name="An")
    container.tuition_service.create_tuition(student_id=s, period="Tháng 1/2026", due_date=date(2026, 1, 10))
    container.tuition_service.create_tuition(student_id=s, period="Tháng 2/2026", due_date=date(2026, 2, 10))

    report = container.report_service.build(
        start=date(2026, 1, 1), end=date(2026, 1, 31), as_of=date(2026, 1, 1), period="Tháng 2/2026"
    )
    assert report.totals["total_expected"] == 500000
    assert report.attendance == []
