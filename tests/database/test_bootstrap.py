from pathlib import Path

from src.class_journal.class_journal.database.bootstrap import (
    _strip_create_db_and_use,
    _strip_line_comments,
    iter_sql_statements,
)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO entries(name) VALUES('a;b'); SELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO entries(name) VALUES('a;b')", 'SELECT "x;y"', "SELECT 1"]


def test_schema_declares_the_attendance_key_and_cascade():
    sql = _strip_create_db_and_use(_strip_line_comments(SCHEMA_PATH.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))

    assert len(statements) == 4
    attendance = next(s for s in statements if "TABLE IF NOT EXISTS attendance" in s)
    assert "UNIQUE KEY uq_attendance_student_date_hour (student_id, date, hour)" in attendance
    assert "REFERENCES students(id) ON DELETE CASCADE" in attendance
    assert not any(s.upper().startswith(("USE", "CREATE DATABASE")) for s in statements)


def test_group_and_status_columns_compare_exactly():
    sql = _strip_create_db_and_use(_strip_line_comments(SCHEMA_PATH.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))
    students = next(s for s in statements if "TABLE IF NOT EXISTS students" in s)
    attendance = next(s for s in statements if "TABLE IF NOT EXISTS attendance" in s)

    assert "group_name VARCHAR(100) COLLATE utf8mb4_bin NOT NULL" in students
    assert "status VARCHAR(64) COLLATE utf8mb4_bin NOT NULL" in attendance
    assert "date VARCHAR(64) COLLATE utf8mb4_bin NOT NULL" in attendance
