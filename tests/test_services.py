from __future__ import annotations

import pytest

from src.classroom_manager.classroom_manager.core.enums import Role
from src.classroom_manager.classroom_manager.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)


def test_authenticate_demo_teacher(container):
    user = container.auth_service.authenticate("  Teacher@Example.com ", "teacher123")
    assert user.role == Role.TEACHER
    assert user.full_name == "Cô Lan"


@pytest.mark.parametrize(
    "email,password",
    [("teacher@example.com", "wrong"), ("nobody@example.com", "teacher123"), ("", "")],
)
def test_authenticate_rejects_bad_credentials(container, email, password):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate(email, password)


def test_search_and_change_role(container):
    profile_svc = container.profile_service
    student = profile_svc.search("student@")[0]

    profile_svc.change_role(profile_id=student.profile_id, new_role="teacher")

    assert profile_svc.get(student.profile_id).role == Role.TEACHER
    assert len(profile_svc.search("")) == 3


def test_change_role_validation(container):
    with pytest.raises(ValidationError):
        container.profile_service.change_role(profile_id=1, new_role="owner")
    with pytest.raises(NotFoundError):
        container.profile_service.change_role(profile_id=999, new_role="admin")


def test_create_class_from_day_picker(container):
    class_id = container.class_service.create_class(name=" IELTS A ", days=["T4", "T2"], time="08:00")
    cls = container.class_service.get(class_id)

    assert cls.name == "IELTS A"
    assert cls.schedule == "T2/T4 - 08:00"


def test_free_text_schedule_kept_verbatim(container):
    class_id = container.class_service.create_class(name="Lớp tự do", schedule="Linh hoạt theo tuần")
    assert container.class_service.get(class_id).schedule == "Linh hoạt theo tuần"


def test_update_and_delete_class(container):
    svc = container.class_service
    class_id = svc.create_class(name="Giao tiếp", days=["T3"], time="19:00")

    svc.update_class(class_id=class_id, name="Giao tiếp tối", days=["T3", "T5"], time="19:30")
    assert svc.get(class_id).schedule == "T3/T5 - 19:30"

    svc.delete_class(class_id)
    with pytest.raises(NotFoundError):
        svc.get(class_id)


def test_class_requires_name(container):
    with pytest.raises(ValidationError):
        container.class_service.create_class(name="  ")


def test_student_lifecycle(container):
    class_id = container.class_service.create_class(name="IELTS A")
    svc = container.student_service

    sid = svc.add_student(class_id=class_id, name="Trần Minh Anh", phone=" 0901 ")
    svc.update_student(student_id=sid, name="Trần Minh Anh", parent_name="Trần Văn B")

    students = svc.list_for_class(class_id)
    assert [(s.name, s.parent_name, s.phone) for s in students] == [("Trần Minh Anh", "Trần Văn B", None)]

    svc.remove_student(sid)
    assert svc.list_for_class(class_id) == []


def test_student_needs_existing_class(container):
    with pytest.raises(NotFoundError):
        container.student_service.add_student(class_id=42, name="Ai đó")
