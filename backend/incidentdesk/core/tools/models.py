import uuid
from datetime import datetime
from sqlalchemy import DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from incidentdesk.db.base import Base


class Tool(Base):
    __tablename__ = "tools"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    screenshot: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    impact: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_used: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    usage_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    effectiveness: Mapped[str | None] = mapped_column(String(20), nullable=True)
