from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.logs.models import SystemLog
from incidentdesk.core.logs.schemas import SystemLogCreate
from incidentdesk.db.base import utcnow
from incidentdesk.errors import storage_errors

ALL = "all"
DEFAULT_LIMIT = 100
MAX_LIMIT = 1000


async def list_logs(
    db: AsyncSession,
    severity: str | None = None,
    source: str | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[SystemLog]:
    stmt = select(SystemLog).order_by(SystemLog.event_time.desc()).limit(limit)
    if severity and severity != ALL:
        stmt = stmt.where(SystemLog.severity == severity)
    if source and source != ALL:
        stmt = stmt.where(SystemLog.source == source)
    async with storage_errors("Failed to fetch logs"):
        result = await db.execute(stmt)
        return list(result.scalars().all())


async def create_log(db: AsyncSession, data: SystemLogCreate) -> SystemLog:
    entry = SystemLog(
        event_time=data.event_time or utcnow(),
        severity=data.severity.value,
        source=data.source,
        source_ip=data.source_ip,
        action=data.action,
        description=data.description,
    )
    async with storage_errors("Failed to create log entry"):
        db.add(entry)
        await db.flush()
        await db.refresh(entry)
    return entry
