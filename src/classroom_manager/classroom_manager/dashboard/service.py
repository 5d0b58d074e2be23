from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..alerts.engine import AlertEngine
from ..alerts.model import AlertEntry
from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_local
from ..schedules.agenda import AgendaCalculator, AgendaItem
from ..tuition.repository import TuitionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Overview:
    today: date
    generated_at: datetime
    agenda: list[AgendaItem] = field(default_factory=list)
    alerts: list[AlertEntry] = field(default_factory=list)

    def to_dict(self, agenda: AgendaCalculator | None = None) -> dict:
        items = []
        for item in self.agenda:
            d = item.to_dict()
            if agenda is not None:
                d["due"] = agenda.is_due(item, self.generated_at)
            items.append(d)
        return {
            "today": self.today.strftime("%Y-%m-%d"),
            "generated_at": self.generated_at.strftime("%H:%M"),
            "agenda": items,
            "alerts": [a.to_dict() for a in self.alerts],
        }


class OrchestrationService:
    """Today's agenda plus action-center alerts for the teacher dashboard.

    Reads are independent and fail-open: a failed lookup is logged and treated
    as "no data" for that lookup only.
    """

    def __init__(
        self,
        classes: ClassRepository,
        attendance: AttendanceRepository,
        tuitions: TuitionRepository,
        *,
        agenda: Optional[AgendaCalculator] = None,
        engine: Optional[AlertEngine] = None,
    ):
        self._classes = classes
        self._attendance = attendance
        self._tuitions = tuitions
        self.agenda = agenda or AgendaCalculator()
        self._engine = engine or AlertEngine(agenda=self.agenda)

    def _load_overdue(self, today: date):
        try:
            return list(self._tuitions.list_overdue(today))
        except Exception:
            logger.exception("Could not load overdue tuitions as of %s", today)
            return []

    def overview(self, now: Optional[datetime] = None) -> Overview:
        now = now or now_local()
        today = now.date()

        try:
            classes = list(self._classes.list_all())
        except Exception:
            logger.exception("Could not load classes for dashboard")
            classes = []

        items = self.agenda.today(classes, now)
        alerts = self._engine.compute_alerts(
            items,
            self._attendance.count_for_class_on_date,
            self._load_overdue(today),
            now=now,
        )
        return Overview(today=today, generated_at=now, agenda=items, alerts=alerts)
