from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Student
from .repository import StudentRepository

_COLUMNS = "student_id, class_id, name, email, phone, parent_name, date_of_birth, notes, joined_at"


def _row_to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        class_id=int(r["class_id"]),
        name=r["name"],
        email=r.get("email"),
        phone=r.get("phone"),
        parent_name=r.get("parent_name"),
        date_of_birth=normalize_mysql_date(r.get("date_of_birth")),
        notes=r.get("notes"),
        joined_at=r.get("joined_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE class_id=%s ORDER BY name ASC",
                (int(class_id),),
            )
            return [_row_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (int(student_id),))
            r = fetchone(cur)
            return _row_to_student(r) if r else None

    def create(
        self,
        *,
        class_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(class_id, name, email, phone, parent_name, date_of_birth, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(class_id), name, email, phone, parent_name, date_of_birth, notes),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        student_id: int,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        parent_name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET name=%s, email=%s, phone=%s, parent_name=%s, date_of_birth=%s, notes=%s
                WHERE student_id=%s
                """,
                (name, email, phone, parent_name, date_of_birth, notes, int(student_id)),
            )
            return cur.rowcount > 0

    def delete(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0
