"""Point-in-time dashboard counters, recomputed from scratch on every call."""

from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from incidentdesk.core.dashboard.schemas import DashboardMetrics
from incidentdesk.core.incidents.models import Incident
from incidentdesk.core.incidents.schemas import ACTIVE_STATUSES, IncidentStatus, Severity
from incidentdesk.errors import storage_errors


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _as_aware(value: datetime, tz) -> datetime:
    # sqlite hands back naive datetimes; they are stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)


def compute_metrics(incidents: Iterable[Incident], now: datetime | None = None) -> DashboardMetrics:
    """Count totals over ``incidents``.

    ``resolvedToday`` counts Resolved incidents whose ``updated_at`` falls on or
    after local midnight of ``now``.
    """
    now = now or datetime.now().astimezone()
    if now.tzinfo is None:
        now = now.astimezone()
    midnight = start_of_day(now)
    active = {s.value for s in ACTIVE_STATUSES}

    total = active_count = resolved_today = critical = 0
    for incident in incidents:
        total += 1
        if incident.status in active:
            active_count += 1
        if incident.status == IncidentStatus.RESOLVED.value and _as_aware(incident.updated_at, now.tzinfo) >= midnight:
            resolved_today += 1
        if incident.severity == Severity.CRITICAL.value:
            critical += 1

    return DashboardMetrics(
        totalIncidents=total,
        activeIncidents=active_count,
        resolvedToday=resolved_today,
        criticalIncidents=critical,
    )


async def recent_incidents(db: AsyncSession, limit: int) -> list[Incident]:
    async with storage_errors("Failed to fetch dashboard data"):
        result = await db.execute(select(Incident).order_by(Incident.created_at.desc()).limit(limit))
        return list(result.scalars().all())
