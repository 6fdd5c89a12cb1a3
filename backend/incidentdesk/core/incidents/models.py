import uuid
from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from incidentdesk.db.base import Base, JSONType, TimestampMixin


class Incident(Base, TimestampMixin):
    """
    Tracked security event.

    reference_id is assigned once at creation and never changes.
    status: Open | Investigating | Contained | Resolved | Closed, any order.
    tools_used / evidence / timeline are JSON arrays replaced wholesale on update.
    """
    __tablename__ = "incidents"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    reference_id: Mapped[str] = mapped_column(String(30), nullable=False, unique=True, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Open", index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    reporter: Mapped[str | None] = mapped_column(String(255), nullable=True)
    assignee: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tools_used: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    evidence: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    timeline: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
