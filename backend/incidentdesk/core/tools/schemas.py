import uuid
from datetime import datetime
from enum import Enum
from pydantic import AnyHttpUrl, BaseModel, Field


class Effectiveness(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ToolCreate(BaseModel):
    name: str = Field(..., max_length=255)
    description: str
    impact: str | None = None
    category: str | None = Field(None, max_length=100)
    screenshot: AnyHttpUrl | None = None
    effectiveness: Effectiveness | None = None
    usage_count: int | None = None
    last_used: datetime | None = None


class ToolRead(BaseModel):
    model_config = {"from_attributes": True}
    id: uuid.UUID
    name: str
    description: str
    screenshot: str | None
    impact: str | None
    category: str | None
    last_used: datetime | None
    usage_count: int | None
    effectiveness: Effectiveness | None
