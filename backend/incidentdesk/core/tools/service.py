from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.tools.models import Tool
from incidentdesk.core.tools.schemas import ToolCreate
from incidentdesk.errors import storage_errors


async def list_tools(db: AsyncSession) -> list[Tool]:
    async with storage_errors("Failed to fetch tools"):
        result = await db.execute(select(Tool).order_by(Tool.usage_count.desc().nulls_last()))
        return list(result.scalars().all())


async def create_tool(db: AsyncSession, data: ToolCreate) -> Tool:
    payload = data.model_dump(exclude_unset=True, mode="json", exclude={"last_used"})
    tool = Tool(**payload, last_used=data.last_used)
    async with storage_errors("Failed to create tool"):
        db.add(tool)
        await db.flush()
        await db.refresh(tool)
    return tool
