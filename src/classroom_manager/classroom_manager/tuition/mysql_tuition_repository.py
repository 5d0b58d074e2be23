from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import TuitionStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, to_int_amount
from .model import OverdueTuition, Tuition
from .repository import TuitionRepository

_SELECT = """
    SELECT
        t.tuition_id, t.class_id, t.student_id, t.amount, t.period, t.status,
        t.due_date, t.paid_at, t.note, t.created_at,
        s.name AS student_name,
        c.name AS class_name
    FROM tuitions t
    LEFT JOIN students s ON s.student_id = t.student_id
    LEFT JOIN classes c ON c.class_id = t.class_id
"""


def _row_to_tuition(r: dict) -> Tuition:
    return Tuition(
        tuition_id=int(r["tuition_id"]),
        class_id=int(r["class_id"]),
        student_id=int(r["student_id"]),
        amount=to_int_amount(r["amount"]),
        period=r["period"],
        status=TuitionStatus(r["status"]),
        due_date=normalize_mysql_date(r.get("due_date")),
        paid_at=r.get("paid_at"),
        note=r.get("note"),
        created_at=r.get("created_at"),
        student_name=r.get("student_name"),
        class_name=r.get("class_name"),
    )


class MySQLTuitionRepository(TuitionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, status: Optional[TuitionStatus] = None) -> Sequence[Tuition]:
        params: list[object] = []
        where = ""
        if status is not None:
            where = "WHERE t.status=%s"
            params.append(status.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY t.created_at DESC, t.tuition_id DESC", tuple(params))
            return [_row_to_tuition(r) for r in fetchall(cur)]

    def list_overdue(self, as_of: date) -> Sequence[OverdueTuition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT t.tuition_id, t.amount, t.period, t.due_date,
                       s.name AS student_name, c.name AS class_name
                FROM tuitions t
                LEFT JOIN students s ON s.student_id = t.student_id
                LEFT JOIN classes c ON c.class_id = t.class_id
                WHERE t.status='pending' AND t.due_date <= %s
                ORDER BY t.due_date ASC, t.tuition_id ASC
                """,
                (as_of,),
            )
            return [
                OverdueTuition(
                    tuition_id=int(r["tuition_id"]),
                    student_name=r.get("student_name") or "-",
                    class_name=r.get("class_name") or "-",
                    amount=to_int_amount(r["amount"]),
                    period=r["period"],
                    due_date=normalize_mysql_date(r["due_date"]),
                )
                for r in fetchall(cur)
            ]

    def get_by_id(self, tuition_id: int) -> Optional[Tuition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE t.tuition_id=%s", (int(tuition_id),))
            r = fetchone(cur)
            return _row_to_tuition(r) if r else None

    def create(
        self,
        *,
        class_id: int,
        student_id: int,
        amount: int,
        period: str,
        due_date: Optional[date],
        note: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tuitions(class_id, student_id, amount, period, status, due_date, note)
                VALUES(%s,%s,%s,%s,'pending',%s,%s)
                """,
                (int(class_id), int(student_id), int(amount), period, due_date, note),
            )
            return int(cur.lastrowid)

    def mark_paid(self, *, tuition_id: int, paid_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE tuitions SET status='paid', paid_at=%s WHERE tuition_id=%s AND status<>'paid'",
                (paid_at, int(tuition_id)),
            )
            return cur.rowcount > 0
