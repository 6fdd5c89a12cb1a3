"""Initial schema: incidents, tools, system logs, chat messages

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00
"""
from typing import Sequence, Union
import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "incidents",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("reference_id", sa.String(30), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("severity", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Open"),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("reporter", sa.String(255), nullable=True),
        sa.Column("assignee", sa.String(255), nullable=True),
        sa.Column("tools_used", postgresql.JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("evidence", postgresql.JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("timeline", postgresql.JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("severity IN ('Low','Medium','High','Critical')", name="ck_incidents_severity"),
        sa.CheckConstraint(
            "status IN ('Open','Investigating','Contained','Resolved','Closed')", name="ck_incidents_status",
        ),
        sa.CheckConstraint("updated_at >= created_at", name="ck_incidents_updated_after_created"),
    )
    op.create_index("ix_incidents_reference_id", "incidents", ["reference_id"], unique=True)
    op.create_index("ix_incidents_severity", "incidents", ["severity"])
    op.create_index("ix_incidents_status", "incidents", ["status"])
    op.create_index("ix_incidents_created_at", "incidents", ["created_at"])

    op.create_table(
        "tools",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("screenshot", sa.String(2048), nullable=True),
        sa.Column("impact", sa.Text, nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("last_used", sa.DateTime(timezone=True), nullable=True),
        sa.Column("usage_count", sa.Integer, nullable=True, server_default="0"),
        sa.Column("effectiveness", sa.String(20), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "system_logs",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("event_time", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("severity", sa.String(20), nullable=False),
        sa.Column("source", sa.String(255), nullable=False),
        sa.Column("source_ip", sa.String(45), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_system_logs_event_time", "system_logs", ["event_time"])
    op.create_index("ix_system_logs_severity", "system_logs", ["severity"])
    op.create_index("ix_system_logs_source", "system_logs", ["source"])

    op.create_table(
        "chat_messages",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("channel", sa.String(100), nullable=False),
        sa.Column("user_name", sa.String(255), nullable=False),
        sa.Column("user_role", sa.String(100), nullable=True),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("incident_reference", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_chat_messages_channel", "chat_messages", ["channel"])


def downgrade() -> None:
    op.drop_table("chat_messages")
    op.drop_table("system_logs")
    op.drop_table("tools")
    op.drop_table("incidents")
