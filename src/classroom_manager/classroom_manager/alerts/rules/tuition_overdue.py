from __future__ import annotations

from ...core.enums import AlertKind, AlertSeverity
from ..model import AlertContext, AlertEntry
from .base import AlertRule


class TuitionOverdueRule(AlertRule):
    """One aggregated alert for all pending tuitions past their due date."""

    def evaluate(self, context: AlertContext) -> list[AlertEntry]:
        count = len(context.overdue_tuitions)
        if not count:
            return []

        return [
            AlertEntry(
                id="tuition-overdue",
                kind=AlertKind.TUITION_OVERDUE,
                title=f"{count} Học phí quá hạn",
                description=f"Có {count} phiếu thu đã đến hạn nhưng chưa thanh toán.",
                severity=AlertSeverity.MEDIUM,
            )
        ]
