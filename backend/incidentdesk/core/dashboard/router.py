from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.dashboard import service
from incidentdesk.core.dashboard.schemas import DashboardRead
from incidentdesk.core.incidents.schemas import IncidentRead
from incidentdesk.dependencies import get_db
from incidentdesk.settings import Settings, get_settings

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardRead)
async def get_dashboard(db: AsyncSession = Depends(get_db), settings: Settings = Depends(get_settings)):
    incidents = await service.recent_incidents(db, settings.DASHBOARD_WINDOW)
    return DashboardRead(
        metrics=service.compute_metrics(incidents),
        recentIncidents=[IncidentRead.model_validate(i) for i in incidents[: settings.DASHBOARD_RECENT]],
    )
