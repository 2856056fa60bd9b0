from __future__ import annotations

from typing import Optional
from fastapi import APIRouter, Query
from pydantic import BaseModel

from ..errors import ServiceError
from ..logs import LogContext
from ..models import Participant, error_response, ok_response
from ..services.participant_svc import get_participant, register_participant, update_participant

router = APIRouter()


class ParticipantRegister(BaseModel):
    near_address: str
    email: str


class ParticipantUpdate(BaseModel):
    near_address: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_student: bool = False
    country: Optional[str] = None
    git: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None


@router.post("/api/participant/register")
def api_participant_register(body: ParticipantRegister):
    log = LogContext("REGISTER_PARTICIPANT", user=body.near_address)
    log.set_payload(body.dict())
    try:
        p = register_participant(body.near_address, body.email)
        log.set_entity("PARTICIPANT", p.near_address)
        log.write("OK")
        return ok_response(p)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Participant, e)


@router.post("/api/participant/update")
def api_participant_update(body: ParticipantUpdate):
    log = LogContext("UPDATE_PARTICIPANT", user=body.near_address)
    log.set_payload(body.dict())
    log.set_entity("PARTICIPANT", body.near_address)
    try:
        p = update_participant(
            body.near_address, body.first_name, body.last_name, body.is_student,
            body.country, body.git, body.linkedin, body.twitter,
        )
        log.write("OK")
        return ok_response(p)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Participant, e)


@router.get("/api/participant/get")
def api_participant_get(near_address: str = Query(...)):
    try:
        return ok_response(get_participant(near_address))
    except ServiceError as e:
        return error_response(Participant, e)
