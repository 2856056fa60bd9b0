from __future__ import annotations

from sqlite3 import Connection
from typing import Optional

from ..db import storage_errors
from ..errors import NotFoundError
from ..models import Submission, SubmissionStatus

_COLUMNS = (
    "id, event_id, project_name, description, thumbnail, git_url, live_demo_url, "
    "video_demo_url, submit_by, status, created_at"
)


def insert(
    conn: Connection,
    event_id: int,
    project_name: str,
    description: str,
    thumbnail: str | None,
    git_url: str,
    live_url: str | None,
    video_url: str,
    submit_by: str,
) -> Submission:
    with storage_errors("insert submission"):
        cur = conn.execute(
            "INSERT INTO submissions(event_id, project_name, description, thumbnail, git_url, "
            "live_demo_url, video_demo_url, submit_by, status) VALUES(?,?,?,?,?,?,?,?,?)",
            (
                int(event_id), project_name, description, thumbnail, git_url,
                live_url, video_url, submit_by, int(SubmissionStatus.DRAFT),
            ),
        )
    return get(conn, int(cur.lastrowid))


def update(
    conn: Connection,
    submission_id: int,
    project_name: str,
    description: str,
    thumbnail: str | None,
    git_url: str,
    live_url: str | None,
    video_url: str,
) -> Submission:
    """Full replace of content fields. Status is not checked here; callers gate on Draft."""
    with storage_errors("update submission"):
        conn.execute(
            "UPDATE submissions SET project_name=?, description=?, thumbnail=?, git_url=?, "
            "live_demo_url=?, video_demo_url=? WHERE id=?",
            (project_name, description, thumbnail, git_url, live_url, video_url, int(submission_id)),
        )
    return get(conn, submission_id)


def submit(conn: Connection, submission_id: int) -> Submission:
    with storage_errors("submit submission"):
        conn.execute(
            "UPDATE submissions SET status=? WHERE id=?",
            (int(SubmissionStatus.SUBMITTED), int(submission_id)),
        )
    return get(conn, submission_id)


def get(conn: Connection, submission_id: int) -> Submission:
    with storage_errors("get submission"):
        row = conn.execute(f"SELECT {_COLUMNS} FROM submissions WHERE id=?", (int(submission_id),)).fetchone()
    if not row:
        raise NotFoundError(f"submission not found: {submission_id}")
    return Submission.from_row(row)


def find_by_user_and_event(conn: Connection, near_address: str, event_id: int) -> Optional[Submission]:
    with storage_errors("get submission"):
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM submissions WHERE submit_by=? AND event_id=?",
            (near_address, int(event_id)),
        ).fetchone()
    return Submission.from_row(row) if row else None


def get_by_user_and_event(conn: Connection, near_address: str, event_id: int) -> Submission:
    sub = find_by_user_and_event(conn, near_address, event_id)
    if sub is None:
        raise NotFoundError(f"no submission by {near_address} for event {event_id}")
    return sub


def list_all(conn: Connection) -> list[Submission]:
    with storage_errors("list submissions"):
        rows = conn.execute(f"SELECT {_COLUMNS} FROM submissions ORDER BY id").fetchall()
    return [Submission.from_row(r) for r in rows]


def list_by_event(conn: Connection, event_id: int) -> list[Submission]:
    with storage_errors("list submissions"):
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM submissions WHERE event_id=? ORDER BY id", (int(event_id),)
        ).fetchall()
    return [Submission.from_row(r) for r in rows]
