import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

OWNER = "owner.near"


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    base = tmp_path_factory.mktemp("db")
    path = base / "submission_test.db"
    # Point the service to this temp DB, and away from any local config.yaml
    os.environ["SUBMISSION_DB_PATH"] = str(path)
    os.environ["SUBMISSION_CONFIG"] = str(base / "missing-config.yaml")
    os.environ["SUBMISSION_OWNER_ID"] = OWNER
    os.environ.pop("SUBMISSION_UPDATE_POLICY", None)
    from submission_service.services.admin_svc import initialize
    initialize()
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    from submission_service.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Clean tables before each test for isolation
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("SUBMISSION_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    from submission_service.services.admin_svc import initialize
    initialize()  # a previous test may have reset the schema
    tables = ["submissions", "submission_team", "events", "participants"]
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in tables:
            conn.execute(f"DELETE FROM {t}")
        # restart AUTOINCREMENT ids so the first event/submission is id=1
        conn.execute("DELETE FROM sqlite_sequence")
        conn.commit()
    finally:
        conn.close()
    yield


@pytest.fixture()
def participant():
    from submission_service.services.participant_svc import register_participant
    return register_participant("addr1", "a@x.com")


@pytest.fixture()
def event():
    from submission_service.services.event_svc import add_event
    return add_event("Hack", "online", "2024-01-01", "2024-01-02", "logo.png")
