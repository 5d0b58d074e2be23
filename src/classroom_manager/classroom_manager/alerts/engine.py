from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..schedules.agenda import AgendaCalculator, AgendaItem
from ..tuition.model import OverdueTuition
from .model import AlertContext, AlertEntry, AttendanceLookup
from .rules.base import AlertRule
from .rules.missing_attendance import MissingAttendanceRule
from .rules.tuition_overdue import TuitionOverdueRule

logger = logging.getLogger(__name__)


class AlertEngine:
    """Run alert rules in order and concatenate their output.

    Rules are evaluated independently; a rule that blows up is logged and
    skipped so the remaining alerts still render.
    """

    def __init__(self, rules: Optional[Sequence[AlertRule]] = None, *, agenda: AgendaCalculator | None = None):
        self._rules = list(rules) if rules is not None else [
            MissingAttendanceRule(agenda),
            TuitionOverdueRule(),
        ]

    def compute_alerts(
        self,
        todays_items: Sequence[AgendaItem],
        attendance_lookup: AttendanceLookup,
        overdue_tuitions: Sequence[OverdueTuition],
        *,
        now: datetime,
    ) -> list[AlertEntry]:
        context = AlertContext(
            now=now,
            todays_items=list(todays_items),
            attendance_lookup=attendance_lookup,
            overdue_tuitions=list(overdue_tuitions or []),
        )

        alerts: list[AlertEntry] = []
        for rule in self._rules:
            try:
                alerts.extend(rule.evaluate(context))
            except Exception:
                logger.exception("Alert rule %s failed", type(rule).__name__)
        return alerts
