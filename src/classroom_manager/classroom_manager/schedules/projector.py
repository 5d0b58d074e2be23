from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Sequence

from ..classes.model import ClassRecord
from ..common.datetime_utils import week_start
from ..core.constants import WEEKDAY_TO_DAY_CODE
from .codec import parse_schedule
from .model import CalendarCell, ScheduleOccurrence

logger = logging.getLogger(__name__)


def day_code_for(d: date) -> str:
    """Map a date to its T2..CN code (Monday is T2, Sunday is CN)."""
    return WEEKDAY_TO_DAY_CODE[d.weekday()]


def occurrences_for(cls: ClassRecord) -> list[ScheduleOccurrence]:
    try:
        slots = parse_schedule(cls.schedule)
    except Exception:
        logger.debug("Skipping unreadable schedule for class %s: %r", cls.class_id, cls.schedule)
        return []

    return [
        ScheduleOccurrence(
            day_code=s.day_code,
            time=s.time,
            class_id=cls.class_id,
            class_name=cls.name,
            level=cls.level,
        )
        for s in slots
    ]


class WeekProjector:
    """Place class meetings on the seven days of a Monday-first week."""

    def project(self, reference: date, classes: Sequence[ClassRecord]) -> list[CalendarCell]:
        monday = week_start(reference)
        parsed = [occurrences_for(c) for c in classes]

        cells: list[CalendarCell] = []
        for offset in range(7):
            day = monday + timedelta(days=offset)
            code = day_code_for(day)
            matched = [o for occ in parsed for o in occ if o.day_code == code]
            matched.sort(key=lambda o: o.time)
            cells.append(CalendarCell(date=day, day_code=code, occurrences=tuple(matched)))
        return cells

    def occurrences_on(self, day: date, classes: Iterable[ClassRecord]) -> list[ScheduleOccurrence]:
        code = day_code_for(day)
        out = [o for c in classes for o in occurrences_for(c) if o.day_code == code]
        out.sort(key=lambda o: o.time)
        return out
