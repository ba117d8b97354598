from __future__ import annotations

import mysql.connector
import pytest

from attendance_ledger.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from attendance_ledger.participants.mysql_participant_repository import MySQLParticipantRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.rowcount = 1
        self._result = []

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        self._conn.executed.append((sql, tuple(params)))
        if self._conn.fail_on and self._conn.fail_on in sql:
            raise mysql.connector.IntegrityError(msg="Duplicate entry")
        self._result = list(self._conn.results.pop(0)) if sql.startswith("SELECT") and self._conn.results else []
        self.rowcount = self._conn.rowcount

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, *, results=None, rowcount=1, fail_on=None):
        self.results = list(results or [])
        self.rowcount = rowcount
        self.fail_on = fail_on
        self.executed = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self, *, with_database=True):
        return self.conn


def test_register_new_identity_inserts_row():
    conn = FakeConnection(results=[[]])
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    p = repo.create_or_reactivate(identity="0xb", display_name="Bob", registered_at=5)

    assert p.registered is True
    assert "FOR UPDATE" in conn.executed[0][0]
    assert conn.executed[1][0].startswith("INSERT INTO participants")
    assert conn.executed[1][1] == ("0xb", "Bob", 5)
    assert conn.commits == 1


def test_register_active_identity_writes_nothing():
    conn = FakeConnection(results=[[{"registered": 1}]])
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    assert repo.create_or_reactivate(identity="0xb", display_name="Bob", registered_at=5) is None
    assert len(conn.executed) == 1


def test_register_evicted_identity_reactivates():
    conn = FakeConnection(results=[[{"registered": 0}]])
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    p = repo.create_or_reactivate(identity="0xb", display_name="Robert", registered_at=9)

    assert p.display_name == "Robert"
    assert conn.executed[1][0].startswith("UPDATE participants SET display_name=%s, registered=1")


def test_register_evicted_identity_blocked_when_not_allowed():
    conn = FakeConnection(results=[[{"registered": 0}]])
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    blocked = repo.create_or_reactivate(identity="0xb", display_name="Bob", registered_at=9, allow_reactivate=False)
    assert blocked is None
    assert len(conn.executed) == 1


def test_register_race_lost_on_insert_returns_none():
    conn = FakeConnection(results=[[]], fail_on="INSERT INTO participants")
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    assert repo.create_or_reactivate(identity="0xb", display_name="Bob", registered_at=5) is None
    assert conn.rollbacks == 1


def test_get_maps_row():
    conn = FakeConnection(results=[[{"identity": "0xb", "display_name": "Bob", "registered": 0, "registered_at": 7}]])
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    p = repo.get("0xb")

    assert (p.identity, p.display_name, p.registered, p.registered_at) == ("0xb", "Bob", False, 7)


def test_deactivate_reports_rowcount():
    conn = FakeConnection(rowcount=0)
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    assert repo.deactivate("0xb") is False
    assert "AND registered=1" in conn.executed[0][0]


def test_deactivate_with_purge_runs_in_one_transaction():
    conn = FakeConnection(rowcount=1)
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    assert repo.deactivate("0xb", purge_attendance=True) is True

    assert [sql.split()[0] for sql, _ in conn.executed] == ["UPDATE", "DELETE"]
    assert conn.executed[1] == ("DELETE FROM attendance_records WHERE identity=%s", ("0xb",))
    assert conn.commits == 1


def test_purge_skipped_when_nothing_was_deactivated():
    conn = FakeConnection(rowcount=0)
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    assert repo.deactivate("0xb", purge_attendance=True) is False
    assert len(conn.executed) == 1


def test_failed_purge_rolls_back_the_deactivation():
    conn = FakeConnection(fail_on="DELETE FROM attendance_records")
    repo = MySQLParticipantRepository(FakeConnFactory(conn))

    with pytest.raises(mysql.connector.IntegrityError):
        repo.deactivate("0xb", purge_attendance=True)
    assert (conn.commits, conn.rollbacks) == (0, 1)


def test_attendance_upsert_uses_single_statement():
    conn = FakeConnection()
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    record = repo.upsert(identity="0xb", day=19675, present=False, updated_by="0xa")

    sql, params = conn.executed[0]
    assert "ON DUPLICATE KEY UPDATE present=VALUES(present)" in sql
    assert params == ("0xb", 19675, 0, "0xa")
    assert (record.day, record.present) == (19675, False)


def test_attendance_get_and_history_map_rows():
    row = {"identity": "0xb", "day_key": 19675, "present": 1, "updated_by": "0xb"}
    conn = FakeConnection(results=[[row], [row]])
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    assert repo.get("0xb", 19675).present is True
    history = repo.get_recent_for_identity("0xb", 5)
    assert [r.day for r in history] == [19675]
    assert conn.executed[1][1] == ("0xb", 5)


def test_failed_statement_rolls_back():
    conn = FakeConnection(fail_on="DELETE FROM attendance_records")
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    with pytest.raises(mysql.connector.IntegrityError):
        repo.delete_for_identity("0xb")
    assert (conn.commits, conn.rollbacks) == (0, 1)
