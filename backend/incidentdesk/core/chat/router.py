from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.chat import service
from incidentdesk.core.chat.schemas import ChatMessageCreate, ChatMessageRead
from incidentdesk.dependencies import get_db
from incidentdesk.schemas import DataResponse

router = APIRouter(tags=["chat"])


@router.get("/chat", response_model=DataResponse[list[ChatMessageRead]])
async def list_messages(
    channel: str = service.DEFAULT_CHANNEL,
    limit: int = Query(service.DEFAULT_LIMIT, ge=1, le=service.MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    return {"data": await service.list_messages(db, channel=channel, limit=limit)}


@router.post("/chat", response_model=DataResponse[ChatMessageRead], status_code=201)
async def post_message(data: ChatMessageCreate, db: AsyncSession = Depends(get_db)):
    return {"data": await service.add_message(db, data)}
