import uuid
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


class LogSeverity(str, Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class SystemLogCreate(BaseModel):
    event_time: datetime | None = None
    severity: LogSeverity
    source: str = Field(..., max_length=255)
    source_ip: str = Field(..., max_length=45)
    action: str = Field(..., max_length=100)
    description: str


class SystemLogRead(BaseModel):
    model_config = {"from_attributes": True}
    id: uuid.UUID
    event_time: datetime
    severity: LogSeverity
    source: str
    source_ip: str
    action: str
    description: str
