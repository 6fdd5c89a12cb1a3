from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.chat.models import ChatMessage
from incidentdesk.core.chat.schemas import ChatMessageCreate
from incidentdesk.db.base import utcnow
from incidentdesk.errors import storage_errors

DEFAULT_CHANNEL = "general"
DEFAULT_LIMIT = 100
MAX_LIMIT = 1000


async def list_messages(db: AsyncSession, channel: str = DEFAULT_CHANNEL, limit: int = DEFAULT_LIMIT) -> list[ChatMessage]:
    async with storage_errors("Failed to fetch chat messages"):
        result = await db.execute(
            select(ChatMessage).where(ChatMessage.channel == channel)
            .order_by(ChatMessage.created_at.asc())
            .limit(limit)
        )
        return list(result.scalars().all())


async def add_message(db: AsyncSession, data: ChatMessageCreate) -> ChatMessage:
    msg = ChatMessage(**data.model_dump(), created_at=utcnow())
    async with storage_errors("Failed to create chat message"):
        db.add(msg)
        await db.flush()
        await db.refresh(msg)
    return msg
