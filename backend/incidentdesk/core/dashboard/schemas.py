from pydantic import BaseModel
from incidentdesk.core.incidents.schemas import IncidentRead


class DashboardMetrics(BaseModel):
    totalIncidents: int
    activeIncidents: int
    resolvedToday: int
    criticalIncidents: int


class DashboardRead(BaseModel):
    metrics: DashboardMetrics
    recentIncidents: list[IncidentRead]
