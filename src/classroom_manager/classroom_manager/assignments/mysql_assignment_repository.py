from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Assignment
from .repository import AssignmentRepository

_COLUMNS = "assignment_id, class_id, title, description, due_date, created_at"


def _row_to_assignment(r: dict) -> Assignment:
    return Assignment(
        assignment_id=int(r["assignment_id"]),
        class_id=int(r["class_id"]),
        title=r["title"],
        description=r.get("description"),
        due_date=normalize_mysql_date(r.get("due_date")),
        created_at=r.get("created_at"),
    )


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM assignments WHERE class_id=%s ORDER BY created_at DESC, assignment_id DESC",
                (int(class_id),),
            )
            return [_row_to_assignment(r) for r in fetchall(cur)]

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM assignments WHERE assignment_id=%s", (int(assignment_id),))
            r = fetchone(cur)
            return _row_to_assignment(r) if r else None

    def create(self, *, class_id: int, title: str, description: Optional[str], due_date: Optional[date]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO assignments(class_id, title, description, due_date) VALUES(%s,%s,%s,%s)",
                (int(class_id), title, description, due_date),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        assignment_id: int,
        title: str,
        description: Optional[str],
        due_date: Optional[date],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE assignments SET title=%s, description=%s, due_date=%s WHERE assignment_id=%s",
                (title, description, due_date, int(assignment_id)),
            )
            return cur.rowcount > 0

    def delete(self, assignment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM assignments WHERE assignment_id=%s", (int(assignment_id),))
            return cur.rowcount > 0
