"""
FastAPI app entry point aggregating per-domain routers under submission_service/routes.
Keep as `uvicorn submission_service.api:app`.
"""
from __future__ import annotations


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .logs import setup_logging
from .models import error_result


app = FastAPI(title="submission-service-api", version="0.1.0")


@app.exception_handler(RequestValidationError)
async def on_request_validation_error(request: Request, exc: RequestValidationError):
    # 请求体/参数校验失败同样走统一的 success/err_msg 结构
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x not in ("body", "query"))
        parts.append(f"{err.get('type', 'invalid')} {loc}".strip())
    return JSONResponse(status_code=200, content=error_result("; ".join(parts) or "invalid request", "validation"))


@app.on_event("startup")
def on_startup():
    setup_logging()


# Include routers (split by business domain)
from .routes import base as base_routes
from .routes import admin as admin_routes
from .routes import participants as participant_routes
from .routes import events as event_routes
from .routes import submissions as submission_routes

app.include_router(base_routes.router)
app.include_router(admin_routes.router)
app.include_router(participant_routes.router)
app.include_router(event_routes.router)
app.include_router(submission_routes.router)
