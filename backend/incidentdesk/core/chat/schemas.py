import uuid
from datetime import datetime
from pydantic import BaseModel, Field


class ChatMessageCreate(BaseModel):
    channel: str = Field(..., min_length=2, max_length=100)
    user_name: str = Field(..., min_length=2, max_length=255)
    user_role: str | None = Field(None, max_length=100)
    message: str = Field(..., min_length=1)
    incident_reference: str | None = Field(None, max_length=30)


class ChatMessageRead(BaseModel):
    model_config = {"from_attributes": True}
    id: uuid.UUID
    channel: str
    user_name: str
    user_role: str | None
    message: str
    incident_reference: str | None
    created_at: datetime
