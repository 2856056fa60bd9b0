from __future__ import annotations

from sqlite3 import Connection

from ..db import storage_errors

TABLES = ("participants", "events", "submissions", "submission_team")

DDL = """
CREATE TABLE IF NOT EXISTS participants (
  near_address TEXT NOT NULL PRIMARY KEY,
  email TEXT NOT NULL UNIQUE,
  first_name TEXT DEFAULT NULL,
  last_name TEXT DEFAULT NULL,
  is_student INTEGER NOT NULL DEFAULT 0,
  country TEXT DEFAULT NULL,
  git_handler TEXT DEFAULT NULL,
  linkedin_handler TEXT DEFAULT NULL,
  twitter_handler TEXT DEFAULT NULL
) WITHOUT ROWID;

CREATE TABLE IF NOT EXISTS events (
  id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
  type TEXT NOT NULL,
  title TEXT NOT NULL,
  start_date TEXT NOT NULL,
  end_date TEXT DEFAULT NULL,
  logo TEXT NOT NULL,
  status INTEGER NOT NULL DEFAULT 1 CHECK (status IN (1, 2))
);

CREATE TABLE IF NOT EXISTS submissions (
  id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
  event_id INTEGER NOT NULL REFERENCES events(id),
  project_name TEXT NOT NULL,
  description TEXT NOT NULL,
  thumbnail TEXT DEFAULT NULL,
  git_url TEXT NOT NULL,
  live_demo_url TEXT DEFAULT NULL,
  video_demo_url TEXT NOT NULL,
  submit_by TEXT NOT NULL REFERENCES participants(near_address),
  status INTEGER NOT NULL DEFAULT 1 CHECK (status IN (1, 2)),
  created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
-- one submission per (participant, event); index form also applies to pre-existing tables
CREATE UNIQUE INDEX IF NOT EXISTS ux_submissions_user_event ON submissions(submit_by, event_id);
CREATE INDEX IF NOT EXISTS idx_submissions_event ON submissions(event_id);

CREATE TABLE IF NOT EXISTS submission_team (
  id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
  near_address TEXT NOT NULL,
  created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

# 子表先删，避免外键检查失败
DROP_DDL = """
DROP TABLE IF EXISTS submissions;
DROP TABLE IF EXISTS submission_team;
DROP TABLE IF EXISTS events;
DROP TABLE IF EXISTS participants;
"""


def ensure_schema(conn: Connection):
    with storage_errors("initialize schema"):
        conn.executescript(DDL)


def drop_schema(conn: Connection):
    with storage_errors("reset schema"):
        conn.executescript(DROP_DDL)


def existing_tables(conn: Connection) -> list[str]:
    q = "SELECT name FROM sqlite_master WHERE type='table' AND name IN ({}) ORDER BY name".format(
        ",".join(["?"] * len(TABLES))
    )
    with storage_errors("list tables"):
        return [r["name"] for r in conn.execute(q, TABLES).fetchall()]
