from __future__ import annotations

from datetime import date

import pytest

from src.classroom_manager.classroom_manager.core.exceptions import NotFoundError, ValidationError


def test_assignment_crud(container):
    class_id = container.class_service.create_class(name="IELTS A")
    svc = container.assignment_service

    first = svc.create_assignment(class_id=class_id, title="Essay 1", due_date=date(2026, 1, 20))
    second = svc.create_assignment(class_id=class_id, title=" Reading 2 ", description="  ")
    assert [(a.title, a.description) for a in svc.list_for_class(class_id)] == [("Reading 2", None), ("Essay 1", None)]

    svc.update_assignment(assignment_id=first, title="Essay 1", description="300 words", due_date=None)
    updated = container.assignments_repo.get_by_id(first)
    assert (updated.description, updated.due_date) == ("300 words", None)

    svc.delete_assignment(second)
    assert [a.assignment_id for a in svc.list_for_class(class_id)] == [first]
    with pytest.raises(ValidationError):
        svc.delete_assignment(second)


def test_assignment_validation(container):
    class_id = container.class_service.create_class(name="IELTS A")
    svc = container.assignment_service

    with pytest.raises(ValidationError):
        svc.create_assignment(class_id=class_id, title="")
    with pytest.raises(NotFoundError):
        svc.create_assignment(class_id=999, title="Essay")
    with pytest.raises(NotFoundError):
        svc.update_assignment(assignment_id=999, title="Essay")
