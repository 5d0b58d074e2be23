from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository

_COLUMNS = "profile_id, full_name, email, password_hash, role, avatar_url, created_at"


def _row_to_profile(r: dict) -> Profile:
    return Profile(
        profile_id=int(r["profile_id"]),
        full_name=r.get("full_name"),
        email=r.get("email"),
        password_hash=r.get("password_hash") or "",
        role=Role(r["role"]),
        avatar_url=r.get("avatar_url"),
        created_at=r.get("created_at"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE profile_id=%s", (int(profile_id),))
            r = fetchone(cur)
            return _row_to_profile(r) if r else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE email=%s", (email,))
            r = fetchone(cur)
            return _row_to_profile(r) if r else None

    def list_all(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles ORDER BY created_at DESC, profile_id DESC")
            return [_row_to_profile(r) for r in fetchall(cur)]

    def set_role(self, profile_id: int, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE profiles SET role=%s WHERE profile_id=%s", (role.value, int(profile_id)))
            return cur.rowcount > 0
