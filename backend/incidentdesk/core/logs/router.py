from datetime import date
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.logs import service
from incidentdesk.core.logs.schemas import SystemLogCreate, SystemLogRead
from incidentdesk.dependencies import get_db
from incidentdesk.schemas import DataResponse
from incidentdesk.views.filters import filter_logs
from incidentdesk.views.logs import logs_to_csv

router = APIRouter(tags=["logs"])


@router.get("/logs", response_model=DataResponse[list[SystemLogRead]])
async def list_logs(
    severity: str | None = None,
    source: str | None = None,
    limit: int = Query(service.DEFAULT_LIMIT, ge=1, le=service.MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    return {"data": await service.list_logs(db, severity=severity, source=source, limit=limit)}


@router.get("/logs/export")
async def export_logs(
    severity: str | None = None,
    source: str | None = None,
    search: str = "",
    limit: int = Query(service.DEFAULT_LIMIT, ge=1, le=service.MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    logs = await service.list_logs(db, severity=severity, source=source, limit=limit)
    rows = filter_logs([SystemLogRead.model_validate(log) for log in logs], search=search)
    filename = f"system-logs-{date.today().isoformat()}.csv"
    return Response(
        content=logs_to_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/logs", response_model=DataResponse[SystemLogRead], status_code=201)
async def create_log(data: SystemLogCreate, db: AsyncSession = Depends(get_db)):
    return {"data": await service.create_log(db, data)}
