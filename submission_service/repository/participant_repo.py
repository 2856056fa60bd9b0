from __future__ import annotations

from sqlite3 import Connection
from typing import Optional

from ..db import storage_errors
from ..errors import NotFoundError
from ..models import Participant

_COLUMNS = (
    "near_address, email, first_name, last_name, is_student, country, "
    "git_handler, linkedin_handler, twitter_handler"
)


def register(conn: Connection, near_address: str, email: str) -> Participant:
    with storage_errors("register participant"):
        conn.execute(
            "INSERT INTO participants(near_address, email) VALUES(?, ?)",
            (near_address, email),
        )
    return get(conn, near_address)


def find(conn: Connection, near_address: str) -> Optional[Participant]:
    with storage_errors("get participant"):
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM participants WHERE near_address=?", (near_address,)
        ).fetchone()
    return Participant.from_row(row) if row else None


def get(conn: Connection, near_address: str) -> Participant:
    p = find(conn, near_address)
    if p is None:
        raise NotFoundError(f"participant not found: {near_address}")
    return p


def exists(conn: Connection, near_address: str) -> bool:
    with storage_errors("get participant"):
        row = conn.execute("SELECT 1 FROM participants WHERE near_address=?", (near_address,)).fetchone()
    return row is not None


def update(
    conn: Connection,
    near_address: str,
    first_name: str | None,
    last_name: str | None,
    is_student: int,
    country: str | None,
    git: str | None,
    linkedin: str | None,
    twitter: str | None,
) -> Participant:
    # 0 行受影响不报错，由回读暴露 not found
    with storage_errors("update participant"):
        conn.execute(
            "UPDATE participants SET first_name=?, last_name=?, is_student=?, country=?, "
            "git_handler=?, linkedin_handler=?, twitter_handler=? WHERE near_address=?",
            (first_name, last_name, int(is_student), country, git, linkedin, twitter, near_address),
        )
    return get(conn, near_address)
