from __future__ import annotations

from pathlib import Path

from src.classroom_manager.classroom_manager.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_splitter_ignores_semicolons_in_quotes_and_comments():
    sql = "-- note; here\nINSERT INTO t VALUES ('a;b');\nSELECT 1"
    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_schema_creates_all_tables_without_db_switch():
    sql = _strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    tables = [s.split()[5] for s in statements if s.upper().startswith("CREATE TABLE IF NOT EXISTS")]
    assert tables == [
        "profiles",
        "classes",
        "students",
        "attendance",
        "tuitions",
        "assignments",
        "vocabulary",
        "quizzes",
        "quiz_questions",
        "quiz_attempts",
    ]
