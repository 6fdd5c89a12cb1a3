from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.incidents import service
from incidentdesk.core.incidents.schemas import IncidentCreate, IncidentRead, IncidentUpdate
from incidentdesk.dependencies import get_db
from incidentdesk.schemas import DataResponse, SuccessResponse
from incidentdesk.settings import Settings, get_settings

router = APIRouter(tags=["incidents"])


@router.get("/incidents", response_model=DataResponse[list[IncidentRead]])
async def list_incidents(
    severity: str | None = None,
    status: str | None = None,
    search: str | None = None,
    limit: int = Query(service.DEFAULT_LIMIT, ge=1, le=service.MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    incidents = await service.list_incidents(db, severity=severity, status=status, search=search, limit=limit)
    return {"data": incidents}


@router.post("/incidents", response_model=DataResponse[IncidentRead], status_code=201)
async def create_incident(
    data: IncidentCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    incident = await service.create_incident(db, data, settings.REFERENCE_ID_MAX_ATTEMPTS)
    return {"data": incident}


@router.get("/incidents/{reference}", response_model=DataResponse[IncidentRead])
async def get_incident(reference: str, db: AsyncSession = Depends(get_db)):
    incident = await service.get_incident(db, reference)
    if not incident:
        raise HTTPException(404, "Incident not found")
    return {"data": incident}


@router.patch("/incidents/{reference}", response_model=DataResponse[IncidentRead])
async def update_incident(reference: str, data: IncidentUpdate, db: AsyncSession = Depends(get_db)):
    incident = await service.get_incident(db, reference)
    if not incident:
        raise HTTPException(404, "Incident not found")
    return {"data": await service.update_incident(db, incident, data)}


@router.delete("/incidents/{reference}", response_model=SuccessResponse)
async def delete_incident(reference: str, db: AsyncSession = Depends(get_db)):
    await service.delete_incident(db, reference)
    return {"success": True}
