from __future__ import annotations

import logging

from ..db import ConnFactory, get_conn
from ..models import Event
from ..repository import event_repo
from .utils import as_id, optional_text, require_text

logger = logging.getLogger(__name__)


def _check_fields(title, event_type, start_date, end_date, logo):
    require_text(title, "title")
    require_text(event_type, "type")
    require_text(start_date, "start_date")
    optional_text(end_date, "end_date")
    require_text(logo, "logo")


def add_event(
    title: str,
    event_type: str,
    start_date: str,
    end_date: str | None,
    logo: str,
    connect: ConnFactory = get_conn,
) -> Event:
    _check_fields(title, event_type, start_date, end_date, logo)
    with connect() as conn:
        ev = event_repo.add(conn, title, event_type, start_date, end_date, logo)
        conn.commit()
    logger.info("event added: id=%s title=%r", ev.id, ev.title)
    return ev


def update_event(
    event_id: int,
    title: str,
    event_type: str,
    start_date: str,
    end_date: str | None,
    logo: str,
    connect: ConnFactory = get_conn,
) -> Event:
    event_id = as_id(event_id, "event_id")
    _check_fields(title, event_type, start_date, end_date, logo)
    with connect() as conn:
        ev = event_repo.update(conn, event_id, title, event_type, start_date, end_date, logo)
        conn.commit()
    logger.info("event updated: id=%s", event_id)
    return ev


def close_event(event_id: int, connect: ConnFactory = get_conn) -> Event:
    """Open -> Closed；已关闭再次关闭为 no-op，仍返回成功。"""
    event_id = as_id(event_id, "event_id")
    with connect() as conn:
        ev = event_repo.close(conn, event_id)
        conn.commit()
    logger.info("event closed: id=%s", event_id)
    return ev


def get_event(event_id: int, connect: ConnFactory = get_conn) -> Event:
    with connect() as conn:
        return event_repo.get(conn, as_id(event_id, "event_id"))


def list_events(connect: ConnFactory = get_conn) -> list[Event]:
    with connect() as conn:
        return event_repo.list_all(conn)


def list_live_events(connect: ConnFactory = get_conn) -> list[Event]:
    with connect() as conn:
        return event_repo.list_live(conn)
