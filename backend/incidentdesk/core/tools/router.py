from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from incidentdesk.core.tools import service
from incidentdesk.core.tools.schemas import ToolCreate, ToolRead
from incidentdesk.dependencies import get_db
from incidentdesk.schemas import DataResponse

router = APIRouter(tags=["tools"])


@router.get("/tools", response_model=DataResponse[list[ToolRead]])
async def list_tools(db: AsyncSession = Depends(get_db)):
    return {"data": await service.list_tools(db)}


@router.post("/tools", response_model=DataResponse[ToolRead], status_code=201)
async def create_tool(data: ToolCreate, db: AsyncSession = Depends(get_db)):
    return {"data": await service.create_tool(db, data)}
