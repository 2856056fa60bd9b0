from fastapi import APIRouter

from ..services.admin_svc import schema_tables

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok", "tables": schema_tables()}

@router.get("/version")
def version():
    return {"app": "submission-service-api", "version": "0.1.0"}
