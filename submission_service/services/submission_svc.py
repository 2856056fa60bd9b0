"""
Submission workflow: rules spanning participants, events and submissions.

Reads across tables to validate, then hands every write to submission_repo.
Each call opens exactly one connection through the injected ``connect`` factory.
"""
from __future__ import annotations

import logging

from ..config import get_config
from ..db import ConnFactory, get_conn
from ..errors import ConflictError, DuplicateKeyError, ValidationError
from ..models import Submission
from ..repository import event_repo, participant_repo, submission_repo
from .utils import as_id, optional_text, require_text

logger = logging.getLogger(__name__)

ALREADY_SUBMITTED = "already submitted"


def _check_content(project_name, description, thumbnail, git_url, live_url, video_url):
    require_text(project_name, "project_name")
    require_text(description, "description")
    optional_text(thumbnail, "thumbnail")
    require_text(git_url, "git_url")
    optional_text(live_url, "live_demo_url")
    require_text(video_url, "video_demo_url")


def draft(
    event_id: int,
    project_name: str,
    description: str,
    thumbnail: str | None,
    git_url: str,
    live_url: str | None,
    video_url: str,
    submit_by: str,
    allow_closed_event: bool | None = None,
    connect: ConnFactory = get_conn,
) -> Submission:
    """
    Create a Draft submission for ``submit_by`` in ``event_id``.

    Checks run in order and stop at the first failure:
    participant exists -> event exists (and is open, if configured) -> no prior submission.
    """
    event_id = as_id(event_id, "event_id")
    submit_by = require_text(submit_by, "submit_by", allow_blank=False)
    _check_content(project_name, description, thumbnail, git_url, live_url, video_url)
    if allow_closed_event is None:
        allow_closed_event = get_config()["allow_drafts_on_closed_events"]

    with connect() as conn:
        if not participant_repo.exists(conn, submit_by):
            raise ValidationError("unknown participant")

        ev = event_repo.find(conn, event_id)
        if ev is None:
            raise ValidationError("unknown event")
        if not allow_closed_event and not ev.is_open:
            raise ConflictError("event closed")

        if submission_repo.find_by_user_and_event(conn, submit_by, event_id) is not None:
            raise ConflictError(ALREADY_SUBMITTED)

        try:
            sub = submission_repo.insert(
                conn, event_id, project_name, description, thumbnail,
                git_url, live_url, video_url, submit_by,
            )
        except DuplicateKeyError as e:
            # 并发 draft 被唯一索引拦下
            raise ConflictError(ALREADY_SUBMITTED) from e
        conn.commit()

    logger.info("submission drafted: id=%s event=%s by=%s", sub.id, event_id, submit_by)
    return sub


def update_submission(
    submission_id: int,
    project_name: str,
    description: str,
    thumbnail: str | None,
    git_url: str,
    live_url: str | None,
    video_url: str,
    strict: bool | None = None,
    connect: ConnFactory = get_conn,
) -> Submission:
    """
    Replace the content of a Draft submission.

    On a Submitted row nothing is written; with ``strict`` (or the
    ``conflict`` update policy) a ConflictError is raised, otherwise the
    unchanged submission is returned.
    """
    submission_id = as_id(submission_id, "submission_id")
    _check_content(project_name, description, thumbnail, git_url, live_url, video_url)
    if strict is None:
        strict = get_config()["submission_update_policy"] == "conflict"

    with connect() as conn:
        current = submission_repo.get(conn, submission_id)
        if not current.is_draft:
            if strict:
                raise ConflictError("submission already submitted")
            logger.info("update ignored, submission %s is not a draft", submission_id)
            return current
        sub = submission_repo.update(
            conn, submission_id, project_name, description, thumbnail, git_url, live_url, video_url,
        )
        conn.commit()

    logger.info("submission updated: id=%s", submission_id)
    return sub


def submit(submission_id: int, connect: ConnFactory = get_conn) -> Submission:
    submission_id = as_id(submission_id, "submission_id")
    with connect() as conn:
        sub = submission_repo.submit(conn, submission_id)
        conn.commit()
    logger.info("submission submitted: id=%s", submission_id)
    return sub


def get_submission(submission_id: int, connect: ConnFactory = get_conn) -> Submission:
    with connect() as conn:
        return submission_repo.get(conn, as_id(submission_id, "submission_id"))


def get_user_event_submission(near_address: str, event_id: int, connect: ConnFactory = get_conn) -> Submission:
    with connect() as conn:
        return submission_repo.get_by_user_and_event(conn, near_address, as_id(event_id, "event_id"))


def list_submissions(connect: ConnFactory = get_conn) -> list[Submission]:
    with connect() as conn:
        return submission_repo.list_all(conn)


def list_event_submissions(event_id: int, connect: ConnFactory = get_conn) -> list[Submission]:
    with connect() as conn:
        return submission_repo.list_by_event(conn, as_id(event_id, "event_id"))
