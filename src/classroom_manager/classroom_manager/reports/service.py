from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..core.enums import AttendanceStatus, TuitionStatus
from ..tuition.repository import TuitionRepository


@dataclass(frozen=True)
class ManagementReport:
    revenue: list[dict]
    attendance: list[dict]
    totals: dict


def percentage(part: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(part * 100.0 / total, 1)


class ManagementReportService:
    """Revenue and attendance aggregation per class for the management dashboard."""

    def __init__(self, classes: ClassRepository, tuitions: TuitionRepository, attendance: AttendanceRepository):
        self._classes = classes
        self._tuitions = tuitions
        self._attendance = attendance

    def build(
        self,
        *,
        start: date,
        end: date,
        as_of: date,
        period: Optional[str] = None,
    ) -> ManagementReport:
        names = {c.class_id: c.name for c in self._classes.list_all()}

        revenue_map: dict[int, dict] = {}
        students_by_class: dict[int, set[int]] = {}
        for t in self._tuitions.list_all():
            if period and t.period != period:
                continue

            r = revenue_map.get(t.class_id)
            if not r:
                r = {
                    "class_id": t.class_id,
                    "class_name": names.get(t.class_id) or t.class_name or "-",
                    "total_paid": 0,
                    "total_pending": 0,
                    "total_overdue": 0,
                    "total_expected": 0,
                }
                revenue_map[t.class_id] = r

            r["total_expected"] += t.amount
            if t.status == TuitionStatus.PAID:
                r["total_paid"] += t.amount
            elif t.status == TuitionStatus.OVERDUE or t.is_overdue(as_of):
                r["total_overdue"] += t.amount
            else:
                r["total_pending"] += t.amount
            students_by_class.setdefault(t.class_id, set()).add(t.student_id)

        revenue = []
        for class_id, r in revenue_map.items():
            revenue.append({**r, "student_count": len(students_by_class.get(class_id, ()))})
        revenue.sort(key=lambda x: x["total_expected"], reverse=True)

        attendance_map: dict[int, dict] = {}
        for rec in self._attendance.list_in_range(start=start, end=end):
            a = attendance_map.get(rec.class_id)
            if not a:
                a = {
                    "class_id": rec.class_id,
                    "class_name": names.get(rec.class_id, "-"),
                    "present_count": 0,
                    "absent_count": 0,
                    "late_count": 0,
                    "total_attendance_records": 0,
                }
                attendance_map[rec.class_id] = a

            a["total_attendance_records"] += 1
            if rec.status == AttendanceStatus.PRESENT:
                a["present_count"] += 1
            elif rec.status == AttendanceStatus.ABSENT:
                a["absent_count"] += 1
            else:
                a["late_count"] += 1

        attendance = []
        for a in attendance_map.values():
            attendance.append({**a, "present_rate": percentage(a["present_count"], a["total_attendance_records"])})
        attendance.sort(key=lambda x: x["present_rate"])

        total_expected = sum(r["total_expected"] for r in revenue)
        total_paid = sum(r["total_paid"] for r in revenue)
        total_records = sum(a["total_attendance_records"] for a in attendance)
        total_present = sum(a["present_count"] for a in attendance)

        totals = {
            "total_expected": total_expected,
            "total_paid": total_paid,
            "total_overdue": sum(r["total_overdue"] for r in revenue),
            "collection_rate": percentage(total_paid, total_expected),
            "average_present_rate": percentage(total_present, total_records),
        }
        return ManagementReport(revenue=revenue, attendance=attendance, totals=totals)
