from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClassRecord
from .repository import ClassRepository


def _row_to_class(r: dict) -> ClassRecord:
    return ClassRecord(
        class_id=int(r["class_id"]),
        name=r["name"],
        schedule=r.get("schedule"),
        level=r.get("level"),
        owner_id=int(r["owner_id"]) if r.get("owner_id") is not None else None,
        created_at=r.get("created_at"),
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClassRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, schedule, level, owner_id, created_at
                FROM classes
                ORDER BY name ASC
                """
            )
            return [_row_to_class(r) for r in fetchall(cur)]

    def get_by_id(self, class_id: int) -> Optional[ClassRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, schedule, level, owner_id, created_at
                FROM classes
                WHERE class_id=%s
                """,
                (int(class_id),),
            )
            r = fetchone(cur)
            return _row_to_class(r) if r else None

    def create(
        self,
        *,
        name: str,
        schedule: Optional[str],
        level: Optional[str],
        owner_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO classes(name, schedule, level, owner_id) VALUES(%s,%s,%s,%s)",
                (name, schedule, level, owner_id),
            )
            return int(cur.lastrowid)

    def update(self, *, class_id: int, name: str, schedule: Optional[str], level: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE classes SET name=%s, schedule=%s, level=%s WHERE class_id=%s",
                (name, schedule, level, int(class_id)),
            )
            return cur.rowcount > 0

    def delete(self, class_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes WHERE class_id=%s", (int(class_id),))
            return cur.rowcount > 0
