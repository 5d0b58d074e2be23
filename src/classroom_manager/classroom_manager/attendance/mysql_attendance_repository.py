from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceMark, AttendanceRecord
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        class_id=int(r["class_id"]),
        date=normalize_mysql_date(r["date"]),
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_for_class_on_date(self, class_id: int, on: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM attendance WHERE class_id=%s AND date=%s",
                (int(class_id), on),
            )
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def list_for_class_on_date(self, class_id: int, on: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, class_id, date, status
                FROM attendance
                WHERE class_id=%s AND date=%s
                """,
                (int(class_id), on),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def upsert_many(self, *, class_id: int, on: date, marks: Sequence[AttendanceMark]) -> int:
        if not marks:
            return 0

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance(student_id, class_id, date, status)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                [(int(m.student_id), int(class_id), on, m.status.value) for m in marks],
            )
            return len(marks)

    def list_in_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, class_id, date, status
                FROM attendance
                WHERE date BETWEEN %s AND %s
                ORDER BY date ASC, class_id ASC
                """,
                (start, end),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
