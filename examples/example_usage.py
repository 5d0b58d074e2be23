"""Ví dụ: dùng service layer (không qua Flask) với backend key-value trong bộ nhớ."""

from datetime import date, datetime

from src.classroom_manager.classroom_manager.container import build_container


def main():
    container = build_container(backend="kv")

    class_id = container.class_service.create_class(name="IELTS A", days=["T2", "T4"], time="08:00", level="5.5")
    student_id = container.student_service.add_student(class_id=class_id, name="Trần Minh Anh")
    container.tuition_service.create_tuition(
        student_id=student_id, amount=500000, due_date=date(2026, 1, 10), today=date(2026, 1, 1)
    )

    now = datetime(2026, 1, 12, 8, 30)  # thứ Hai
    print(container.schedule_service.calendar_week(now.date()).to_dict())
    print(container.orchestration_service.overview(now).to_dict(container.orchestration_service.agenda))


if __name__ == "__main__":
    main()
