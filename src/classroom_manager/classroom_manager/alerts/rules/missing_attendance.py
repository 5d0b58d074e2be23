from __future__ import annotations

import logging

from ...core.enums import AlertKind, AlertSeverity
from ...schedules.agenda import AgendaCalculator
from ..model import AlertContext, AlertEntry
from .base import AlertRule

logger = logging.getLogger(__name__)


class MissingAttendanceRule(AlertRule):
    """Today's classes past the attendance buffer with no attendance rows."""

    def __init__(self, agenda: AgendaCalculator | None = None):
        self._agenda = agenda or AgendaCalculator()

    def evaluate(self, context: AlertContext) -> list[AlertEntry]:
        today = context.now.date()
        alerts: list[AlertEntry] = []
        seen: set[int] = set()

        for item in context.todays_items:
            if item.class_id in seen or not self._agenda.is_due(item, context.now):
                continue
            seen.add(item.class_id)

            try:
                count = context.attendance_lookup(item.class_id, today)
            except Exception:
                logger.exception("Attendance lookup failed for class %s on %s", item.class_id, today)
                continue

            if count:
                continue

            alerts.append(
                AlertEntry(
                    id=f"attendance-{item.class_id}",
                    kind=AlertKind.MISSING_ATTENDANCE,
                    title=f"Chưa điểm danh: {item.class_name}",
                    description=f"Lớp lúc {item.time} hôm nay chưa có dữ liệu điểm danh.",
                    severity=AlertSeverity.HIGH,
                    target_class_id=item.class_id,
                )
            )
        return alerts
