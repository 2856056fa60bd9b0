from __future__ import annotations

from typing import Optional
from fastapi import APIRouter, Body, Query
from pydantic import BaseModel

from ..errors import ServiceError
from ..logs import LogContext
from ..models import Event, error_list_response, error_response, ok_list_response, ok_response
from ..services.event_svc import add_event, close_event, get_event, list_events, list_live_events, update_event

router = APIRouter()


class EventAdd(BaseModel):
    title: str
    event_type: str
    start_date: str  # YYYY-MM-DD
    end_date: Optional[str] = None
    logo: str


class EventUpdate(EventAdd):
    id: int


@router.post("/api/event/add")
def api_event_add(body: EventAdd):
    log = LogContext("ADD_EVENT")
    log.set_payload(body.dict())
    try:
        ev = add_event(body.title, body.event_type, body.start_date, body.end_date, body.logo)
        log.set_entity("EVENT", ev.id)
        log.write("OK")
        return ok_response(ev)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Event, e)


@router.post("/api/event/update")
def api_event_update(body: EventUpdate):
    log = LogContext("UPDATE_EVENT")
    log.set_payload(body.dict())
    log.set_entity("EVENT", body.id)
    try:
        ev = update_event(body.id, body.title, body.event_type, body.start_date, body.end_date, body.logo)
        log.write("OK")
        return ok_response(ev)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Event, e)


@router.post("/api/event/close")
def api_event_close(id: int = Body(..., embed=True)):
    log = LogContext("CLOSE_EVENT")
    log.set_entity("EVENT", id)
    try:
        ev = close_event(id)
        log.write("OK")
        return ok_response(ev)
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_response(Event, e)


@router.get("/api/event/get")
def api_event_get(id: int = Query(...)):
    try:
        return ok_response(get_event(id))
    except ServiceError as e:
        return error_response(Event, e)


@router.get("/api/event/list")
def api_event_list():
    try:
        return ok_list_response(list_events())
    except ServiceError as e:
        return error_list_response(e)


@router.get("/api/event/live")
def api_event_live():
    try:
        return ok_list_response(list_live_events())
    except ServiceError as e:
        return error_list_response(e)
