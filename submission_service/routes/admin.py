from __future__ import annotations

from fastapi import APIRouter, Header

from ..auth import NOT_OWNER_MSG, is_owner
from ..errors import ServiceError
from ..logs import LogContext
from ..models import error_result, ok_result
from ..services.admin_svc import initialize, reset

router = APIRouter()


@router.post("/api/admin/init")
def api_admin_init(x_caller_id: str | None = Header(None)):
    log = LogContext("INIT_SERVICE", user=x_caller_id or "anonymous")
    if not is_owner(x_caller_id):
        log.write("ERROR", NOT_OWNER_MSG)
        return error_result(NOT_OWNER_MSG, "forbidden")
    try:
        initialize()
        log.write("OK")
        return ok_result()
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_result(str(e), e.kind)


@router.post("/api/admin/reset")
def api_admin_reset(x_caller_id: str | None = Header(None)):
    log = LogContext("RESET_SERVICE", user=x_caller_id or "anonymous")
    if not is_owner(x_caller_id):
        log.write("ERROR", NOT_OWNER_MSG)
        return error_result(NOT_OWNER_MSG, "forbidden")
    try:
        reset()
        log.write("OK")
        return ok_result()
    except ServiceError as e:
        log.write("ERROR", str(e))
        return error_result(str(e), e.kind)
