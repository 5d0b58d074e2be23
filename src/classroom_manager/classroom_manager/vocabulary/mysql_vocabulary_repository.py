from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json
from .model import VocabularyList, VocabularyWord, words_from_dicts
from .repository import VocabularyRepository

_COLUMNS = "list_id, class_id, week, words, created_at"


def _row_to_list(r: dict) -> VocabularyList:
    return VocabularyList(
        list_id=int(r["list_id"]),
        class_id=int(r["class_id"]),
        week=r["week"],
        words=words_from_dicts(load_json(r.get("words"), [])),
        created_at=r.get("created_at"),
    )


class MySQLVocabularyRepository(VocabularyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[VocabularyList]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM vocabulary WHERE class_id=%s ORDER BY created_at DESC, list_id DESC",
                (int(class_id),),
            )
            return [_row_to_list(r) for r in fetchall(cur)]

    def get_by_id(self, list_id: int) -> Optional[VocabularyList]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM vocabulary WHERE list_id=%s", (int(list_id),))
            r = fetchone(cur)
            return _row_to_list(r) if r else None

    def create(self, *, class_id: int, week: str, words: Sequence[VocabularyWord]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO vocabulary(class_id, week, words) VALUES(%s,%s,%s)",
                (int(class_id), week, dump_json([w.to_dict() for w in words])),
            )
            return int(cur.lastrowid)

    def update(self, *, list_id: int, week: str, words: Sequence[VocabularyWord]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE vocabulary SET week=%s, words=%s WHERE list_id=%s",
                (week, dump_json([w.to_dict() for w in words]), int(list_id)),
            )
            return cur.rowcount > 0

    def delete(self, list_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM vocabulary WHERE list_id=%s", (int(list_id),))
            return cur.rowcount > 0
