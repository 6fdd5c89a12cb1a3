from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.incidents.models import Incident
from incidentdesk.core.incidents.reference import generate_reference_id
from incidentdesk.core.incidents.schemas import IncidentCreate, IncidentUpdate
from incidentdesk.db.base import utcnow
from incidentdesk.errors import StorageError, storage_errors
from incidentdesk.logging import get_logger

logger = get_logger("incidentdesk.incidents")

ALL = "all"
DEFAULT_LIMIT = 50
MAX_LIMIT = 1000

# Only these columns may be cleared with an explicit null in a partial update.
NULLABLE_FIELDS = {"assignee"}


async def reference_id_taken(db: AsyncSession, reference_id: str) -> bool:
    result = await db.execute(select(Incident.id).where(Incident.reference_id == reference_id))
    return result.first() is not None


async def allocate_reference_id(db: AsyncSession, max_attempts: int) -> str:
    for attempt in range(1, max_attempts + 1):
        candidate = generate_reference_id()
        if not await reference_id_taken(db, candidate):
            return candidate
        logger.warning("reference_id_collision", reference_id=candidate, attempt=attempt)
    raise StorageError(
        "Failed to create incident",
        f"No free reference id after {max_attempts} attempts",
    )


async def create_incident(db: AsyncSession, data: IncidentCreate, max_reference_attempts: int = 5) -> Incident:
    async with storage_errors("Failed to create incident"):
        reference_id = data.reference_id or await allocate_reference_id(db, max_reference_attempts)
        now = utcnow()
        incident = Incident(
            reference_id=reference_id,
            **data.model_dump(mode="json", exclude={"reference_id"}),
            created_at=now,
            updated_at=now,
        )
        db.add(incident)
        await db.flush()
        await db.refresh(incident)
    logger.info("incident_created", reference_id=incident.reference_id, severity=incident.severity)
    return incident


async def get_incident(db: AsyncSession, reference_id: str) -> Incident | None:
    async with storage_errors("Failed to fetch incident"):
        result = await db.execute(select(Incident).where(Incident.reference_id == reference_id))
        return result.scalar_one_or_none()


async def list_incidents(
    db: AsyncSession,
    severity: str | None = None,
    status: str | None = None,
    search: str | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[Incident]:
    stmt = select(Incident).order_by(Incident.created_at.desc()).limit(limit)
    if severity and severity != ALL:
        stmt = stmt.where(Incident.severity == severity)
    if status and status != ALL:
        stmt = stmt.where(Incident.status == status)
    if search:
        stmt = stmt.where(or_(
            Incident.title.icontains(search, autoescape=True),
            Incident.reference_id.icontains(search, autoescape=True),
            Incident.reporter.icontains(search, autoescape=True),
        ))
    async with storage_errors("Failed to fetch incidents"):
        result = await db.execute(stmt)
        return list(result.scalars().all())


async def update_incident(db: AsyncSession, incident: Incident, data: IncidentUpdate) -> Incident:
    changes = data.model_dump(exclude_unset=True, mode="json")
    for field, value in changes.items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(incident, field, value)
    incident.updated_at = utcnow()
    async with storage_errors("Failed to update incident"):
        await db.flush()
        await db.refresh(incident)
    logger.info("incident_updated", reference_id=incident.reference_id, fields=sorted(changes))
    return incident


async def delete_incident(db: AsyncSession, reference_id: str) -> int:
    async with storage_errors("Failed to delete incident"):
        result = await db.execute(delete(Incident).where(Incident.reference_id == reference_id))
    logger.info("incident_deleted", reference_id=reference_id, rows=result.rowcount)
    return result.rowcount
