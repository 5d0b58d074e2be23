from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_local, shift_week, week_start
from .model import CalendarCell
from .projector import WeekProjector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarWeek:
    start: date
    end: date
    today: date
    cells: list[CalendarCell]

    def to_dict(self) -> dict:
        return {
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "today": self.today.strftime("%Y-%m-%d"),
            "prev": shift_week(self.start, -1).strftime("%Y-%m-%d"),
            "next": shift_week(self.start, 1).strftime("%Y-%m-%d"),
            "days": [
                {**c.to_dict(), "is_today": c.date == self.today}
                for c in self.cells
            ],
        }


class ScheduleService:
    """Use case: teaching calendar for one week."""

    def __init__(self, classes: ClassRepository, *, projector: Optional[WeekProjector] = None):
        self._classes = classes
        self._projector = projector or WeekProjector()

    def calendar_week(self, reference: Optional[date] = None, *, today: Optional[date] = None) -> CalendarWeek:
        today = today or now_local().date()
        reference = reference or today

        try:
            classes = list(self._classes.list_all())
        except Exception:
            logger.exception("Could not load classes for calendar week of %s", reference)
            classes = []

        start = week_start(reference)
        return CalendarWeek(
            start=start,
            end=start + timedelta(days=6),
            today=today,
            cells=self._projector.project(reference, classes),
        )
