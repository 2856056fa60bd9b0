from __future__ import annotations

from typing import Optional
from fastapi import APIRouter, Body, Query
from pydantic import BaseModel

from ..errors import ServiceError
from ..logs import LogContext
from ..models import Submission, error_list_response, error_response, ok_list_response, ok_response
from ..services.submission_svc import (
    draft,
    get_submission,
    get_user_event_submission,
    list_event_submissions,
    list_submissions,
    submit,
    update_submission,
)

router = APIRouter()


class SubmissionContent(BaseModel):
    project_name: str
    description: str
    thumbnail: Optional[str] = None
    git_url: str
    live_demo_url: Optional[str] = None
    video_demo_url: str


class SubmissionDraft(SubmissionContent):
    event_id: int
    submit_by: str


class SubmissionUpdate(SubmissionContent):
    id: int


@router.post("/api/submission/draft")
def api_submission_draft(body: SubmissionDraft):
    log = LogContext("DRAFT_SUBMISSION", user=body.submit_by)
    log.set_payload(body.dict())
    try:
        sub = draft(
            body.event_id, body.project_name, body.description, body.thumbnail,
            body.git_url, body.live_demo_url, body.video_demo_url, body.submit_by,
        )
        log.set_entity("SUBMISSION", sub.id)
        log.write("OK")
        return ok_response(sub)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Submission, e)


@router.post("/api/submission/update")
def api_submission_update(body: SubmissionUpdate):
    log = LogContext("UPDATE_SUBMISSION")
    log.set_payload(body.dict())
    log.set_entity("SUBMISSION", body.id)
    try:
        sub = update_submission(
            body.id, body.project_name, body.description, body.thumbnail,
            body.git_url, body.live_demo_url, body.video_demo_url,
        )
        log.write("OK")
        return ok_response(sub)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Submission, e)


@router.post("/api/submission/submit")
def api_submission_submit(id: int = Body(..., embed=True)):
    log = LogContext("SUBMIT_SUBMISSION")
    log.set_entity("SUBMISSION", id)
    try:
        sub = submit(id)
        log.write("OK")
        return ok_response(sub)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Submission, e)


@router.get("/api/submission/get")
def api_submission_get(id: int = Query(...)):
    try:
        return ok_response(get_submission(id))
    except ServiceError as e:
        return error_response(Submission, e)


@router.get("/api/submission/by-user")
def api_submission_by_user(near_address: str = Query(...), event_id: int = Query(...)):
    try:
        return ok_response(get_user_event_submission(near_address, event_id))
    except ServiceError as e:
        return error_response(Submission, e)


@router.get("/api/submission/list")
def api_submission_list(event_id: Optional[int] = Query(None)):
    try:
        items = list_submissions() if event_id is None else list_event_submissions(event_id)
        return ok_list_response(items)
    except ServiceError as e:
        return error_list_response(e)
