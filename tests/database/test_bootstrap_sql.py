from pathlib import Path

from attendance_ledger.database.bootstrap import DEFAULT_SCHEMA_PATH, iter_sql_statements


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES('a;b'); SELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES('a;b')", 'SELECT "x;y"', "SELECT 1"]


def test_schema_defines_both_tables():
    sql = Path(DEFAULT_SCHEMA_PATH).read_text(encoding="utf-8")

    assert "CREATE TABLE IF NOT EXISTS participants" in sql
    assert "PRIMARY KEY (identity, day_key)" in sql
