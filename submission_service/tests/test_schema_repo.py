"""
Schema 管理测试：建表幂等、reset 删除全部表
"""
import sqlite3

import pytest

from submission_service.db import get_conn
from submission_service.errors import StorageError
from submission_service.repository import schema_repo
from submission_service.services.admin_svc import initialize, reset, schema_tables


def test_initialize_creates_all_tables():
    assert schema_tables() == sorted(["participants", "events", "submissions", "submission_team"])


def test_initialize_is_idempotent():
    initialize()
    initialize()
    assert len(schema_tables()) == 4


def test_initialize_keeps_existing_rows():
    with get_conn() as conn:
        conn.execute("INSERT INTO participants(near_address, email) VALUES('a', 'a@x.com')")
    initialize()
    with get_conn() as conn:
        assert conn.execute("SELECT COUNT(1) AS c FROM participants").fetchone()["c"] == 1


def test_unique_index_on_user_event_exists():
    with get_conn() as conn:
        rows = conn.execute("PRAGMA index_list(submissions)").fetchall()
        idx = {r["name"]: r["unique"] for r in rows}
    assert idx.get("ux_submissions_user_event") == 1


def test_reset_drops_every_table_including_team():
    reset()
    assert schema_tables() == []
    initialize()
    assert len(schema_tables()) == 4


def test_reset_with_rows_present(participant, event):
    with get_conn() as conn:
        conn.execute(
            "INSERT INTO submissions(event_id, project_name, description, git_url, video_demo_url, submit_by, status) "
            "VALUES(?,?,?,?,?,?,1)",
            (event.id, "p", "d", "g", "v", participant.near_address),
        )
    reset()
    assert schema_tables() == []


def test_ensure_schema_storage_error_on_readonly(tmp_path):
    path = tmp_path / "ro.db"
    sqlite3.connect(str(path)).close()
    conn = sqlite3.connect(f"file:{path}?mode=ro", uri=True)
    conn.row_factory = sqlite3.Row
    try:
        with pytest.raises(StorageError):
            schema_repo.ensure_schema(conn)
    finally:
        conn.close()
