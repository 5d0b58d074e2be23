"""Free-text schedule strings such as ``"T2/T4 - 19:00"``.

``parse_schedule`` is lenient: anything it cannot read yields no slots.
``format_schedule`` writes the canonical form used by the class form.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from ..core.constants import DAY_CODES
from .model import ScheduleSlot

_DAY_SEPARATORS = re.compile(r"[/,]")


def parse_schedule(schedule: Optional[str]) -> list[ScheduleSlot]:
    if not schedule:
        return []

    parts = [p.strip() for p in str(schedule).split("-", 1)]
    if len(parts) < 2:
        return []

    day_part, time_part = parts
    days = [d.strip() for d in _DAY_SEPARATORS.split(day_part)]
    return [ScheduleSlot(day_code=d, time=time_part) for d in days]


def format_schedule(days: Sequence[str], time: Optional[str]) -> str:
    day_part = "/".join(days)
    time = (time or "").strip()

    if day_part and time:
        return f"{day_part} - {time}"
    if day_part:
        return day_part
    if time:
        return f"- {time}"
    return ""


def split_schedule(schedule: Optional[str]) -> tuple[list[str], str]:
    """Pre-fill the day picker from a stored string.

    Days outside ``DAY_CODES`` are dropped; the time is returned as-is.
    """

    slots = parse_schedule(schedule)
    if not slots:
        return [], ""
    days = canonical_order(s.day_code for s in slots if s.day_code in DAY_CODES)
    return days, slots[0].time


def canonical_order(days) -> list[str]:
    def _key(d: str) -> tuple[int, str]:
        try:
            return DAY_CODES.index(d), d
        except ValueError:
            return len(DAY_CODES), d

    seen: list[str] = []
    for d in days:
        if d not in seen:
            seen.append(d)
    return sorted(seen, key=_key)


def toggle_day(selected: Sequence[str], day: str) -> list[str]:
    if day in selected:
        return [d for d in selected if d != day]
    return canonical_order([*selected, day])
