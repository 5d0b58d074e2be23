from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ScheduleSlot:
    """One ``{day, time}`` pair parsed out of a schedule string."""

    day_code: str
    time: str


@dataclass(frozen=True)
class ScheduleOccurrence:
    """A class meeting placed on a weekday. Derived, never persisted."""

    day_code: str
    time: str
    class_id: int
    class_name: str
    level: Optional[str] = None


@dataclass(frozen=True)
class CalendarCell:
    date: date
    day_code: str
    occurrences: tuple[ScheduleOccurrence, ...] = ()

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "day_code": self.day_code,
            "occurrences": [
                {
                    "class_id": o.class_id,
                    "name": o.class_name,
                    "level": o.level,
                    "time": o.time,
                }
                for o in self.occurrences
            ],
        }
