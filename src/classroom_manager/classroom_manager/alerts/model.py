from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..core.enums import AlertKind, AlertSeverity
from ..schedules.agenda import AgendaItem
from ..tuition.model import OverdueTuition

# (class_id, date) -> number of attendance rows
AttendanceLookup = Callable[[int, date], Optional[int]]


@dataclass(frozen=True)
class AlertEntry:
    """Việc cần làm hiển thị ở trung tâm hành động của dashboard."""

    id: str
    kind: AlertKind
    title: str
    description: str
    severity: AlertSeverity
    target_class_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "target_class_id": self.target_class_id,
        }


@dataclass(frozen=True)
class AlertContext:
    now: datetime
    todays_items: Sequence[AgendaItem]
    attendance_lookup: AttendanceLookup
    overdue_tuitions: Sequence[OverdueTuition]
