from __future__ import annotations

import logging

from ..db import ConnFactory, get_conn
from ..models import Participant
from ..repository import participant_repo
from .utils import optional_text, require_text

logger = logging.getLogger(__name__)


def register_participant(near_address: str, email: str, connect: ConnFactory = get_conn) -> Participant:
    near_address = require_text(near_address, "near_address", allow_blank=False)
    email = require_text(email, "email", allow_blank=False)
    with connect() as conn:
        p = participant_repo.register(conn, near_address, email)
        conn.commit()
    logger.info("participant registered: %s", near_address)
    return p


def get_participant(near_address: str, connect: ConnFactory = get_conn) -> Participant:
    with connect() as conn:
        return participant_repo.get(conn, near_address)


def update_participant(
    near_address: str,
    first_name: str | None,
    last_name: str | None,
    is_student: int | bool,
    country: str | None,
    git: str | None,
    linkedin: str | None,
    twitter: str | None,
    connect: ConnFactory = get_conn,
) -> Participant:
    fields = {
        "first_name": first_name, "last_name": last_name, "country": country,
        "git": git, "linkedin": linkedin, "twitter": twitter,
    }
    for k, v in fields.items():
        optional_text(v, k)
    with connect() as conn:
        p = participant_repo.update(
            conn, near_address, first_name, last_name, 1 if is_student else 0,
            country, git, linkedin, twitter,
        )
        conn.commit()
    logger.info("participant updated: %s", near_address)
    return p
