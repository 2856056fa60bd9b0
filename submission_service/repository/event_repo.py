from __future__ import annotations

from sqlite3 import Connection
from typing import Optional

from ..db import storage_errors
from ..errors import NotFoundError
from ..models import Event, EventStatus

_COLUMNS = "id, type, title, start_date, end_date, logo, status"


def add(conn: Connection, title: str, event_type: str, start_date: str, end_date: str | None, logo: str) -> Event:
    with storage_errors("add event"):
        cur = conn.execute(
            "INSERT INTO events(title, type, start_date, end_date, logo, status) VALUES(?,?,?,?,?,?)",
            (title, event_type, start_date, end_date, logo, int(EventStatus.OPEN)),
        )
    return get(conn, int(cur.lastrowid))


def update(
    conn: Connection,
    event_id: int,
    title: str,
    event_type: str,
    start_date: str,
    end_date: str | None,
    logo: str,
) -> Event:
    with storage_errors("update event"):
        conn.execute(
            "UPDATE events SET title=?, type=?, start_date=?, end_date=?, logo=? WHERE id=?",
            (title, event_type, start_date, end_date, logo, int(event_id)),
        )
    return get(conn, event_id)


def close(conn: Connection, event_id: int) -> Event:
    with storage_errors("close event"):
        conn.execute("UPDATE events SET status=? WHERE id=?", (int(EventStatus.CLOSED), int(event_id)))
    return get(conn, event_id)


def find(conn: Connection, event_id: int) -> Optional[Event]:
    with storage_errors("get event"):
        row = conn.execute(f"SELECT {_COLUMNS} FROM events WHERE id=?", (int(event_id),)).fetchone()
    return Event.from_row(row) if row else None


def get(conn: Connection, event_id: int) -> Event:
    ev = find(conn, event_id)
    if ev is None:
        raise NotFoundError(f"event not found: {event_id}")
    return ev


def list_all(conn: Connection) -> list[Event]:
    with storage_errors("list events"):
        rows = conn.execute(f"SELECT {_COLUMNS} FROM events ORDER BY id").fetchall()
    return [Event.from_row(r) for r in rows]


def list_live(conn: Connection) -> list[Event]:
    with storage_errors("list live events"):
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM events WHERE status=? ORDER BY id", (int(EventStatus.OPEN),)
        ).fetchall()
    return [Event.from_row(r) for r in rows]
