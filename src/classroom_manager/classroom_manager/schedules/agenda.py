from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..classes.model import ClassRecord
from ..core.constants import ATTENDANCE_BUFFER_MINUTES
from .projector import WeekProjector, day_code_for


@dataclass(frozen=True)
class AgendaItem:
    """Một lớp học diễn ra hôm nay, kèm giờ học."""

    class_id: int
    class_name: str
    level: Optional[str]
    time: str
    day_code: str

    def to_dict(self) -> dict:
        return {
            "class_id": self.class_id,
            "name": self.class_name,
            "level": self.level,
            "time": self.time,
            "day_code": self.day_code,
        }


class AgendaCalculator:
    def __init__(self, *, buffer_minutes: int = ATTENDANCE_BUFFER_MINUTES, projector: WeekProjector | None = None):
        self._buffer = timedelta(minutes=int(buffer_minutes))
        self._projector = projector or WeekProjector()

    @property
    def buffer_minutes(self) -> int:
        return int(self._buffer.total_seconds() // 60)

    def today(self, classes: Sequence[ClassRecord], now: datetime) -> list[AgendaItem]:
        """Classes meeting on ``now``'s weekday, one item per class, by time."""

        items: list[AgendaItem] = []
        seen: set[int] = set()
        for occ in self._projector.occurrences_on(now.date(), classes):
            if occ.class_id in seen:
                continue
            seen.add(occ.class_id)
            items.append(
                AgendaItem(
                    class_id=occ.class_id,
                    class_name=occ.class_name,
                    level=occ.level,
                    time=occ.time,
                    day_code=day_code_for(now.date()),
                )
            )
        return items

    def starts_at(self, time_s: str, now: datetime) -> Optional[datetime]:
        try:
            t = datetime.strptime(time_s.strip(), "%H:%M").time()
        except (AttributeError, ValueError):
            return None
        return datetime.combine(now.date(), t)

    def is_due(self, item: AgendaItem | str, now: datetime) -> bool:
        """True once ``now`` is within the attendance buffer before class start."""

        time_s = item if isinstance(item, str) else item.time
        start = self.starts_at(time_s, now)
        if start is None:
            return False
        return now.replace(tzinfo=None) >= start - self._buffer
