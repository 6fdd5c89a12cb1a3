from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from incidentdesk.db.session import get_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        async with session.begin():
            yield session
