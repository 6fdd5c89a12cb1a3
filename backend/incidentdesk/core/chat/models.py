import uuid
from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from incidentdesk.db.base import Base, CreatedAtMixin


class ChatMessage(Base, CreatedAtMixin):
    """Channel message. incident_reference is free text, not a foreign key."""
    __tablename__ = "chat_messages"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    channel: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    incident_reference: Mapped[str | None] = mapped_column(String(30), nullable=True)
