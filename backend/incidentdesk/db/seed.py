"""Insert demo data for a fresh database. Safe to run more than once."""

import asyncio

from sqlalchemy import select

from incidentdesk.core.chat.models import ChatMessage
from incidentdesk.core.incidents.models import Incident
from incidentdesk.core.incidents.schemas import IncidentCreate
from incidentdesk.core.incidents.service import create_incident
from incidentdesk.core.logs.models import SystemLog
from incidentdesk.core.tools.models import Tool
from incidentdesk.db.session import get_session
from incidentdesk.logging import get_logger, setup_logging

logger = get_logger("incidentdesk.seed")

TOOLS = [
    {"name": "Nmap", "description": "Network discovery and port scanning", "category": "Network Scanning",
     "impact": "Mapped exposed services", "effectiveness": "High", "usage_count": 42},
    {"name": "Wireshark", "description": "Packet capture and protocol analysis", "category": "Network Analysis",
     "impact": "Identified exfiltration channel", "effectiveness": "Critical", "usage_count": 37},
    {"name": "Volatility", "description": "Memory forensics framework", "category": "Forensics",
     "impact": "Recovered injected process", "effectiveness": "High", "usage_count": 12},
]

LOGS = [
    {"severity": "Critical", "source": "Firewall", "source_ip": "203.0.113.7", "action": "BLOCKED",
     "description": "Outbound connection to known C2 host"},
    {"severity": "Warning", "source": "Authentication", "source_ip": "10.0.4.21", "action": "ALERT",
     "description": "Repeated failed logins for admin"},
    {"severity": "Info", "source": "Backup System", "source_ip": "10.0.0.5", "action": "COMPLETED",
     "description": "Nightly backup finished"},
]

INCIDENT = {
    "title": "Unusual outbound traffic",
    "type": "Network",
    "severity": "High",
    "description": "Detected anomalous traffic to unknown host",
    "reporter": "J. Doe",
}


async def seed() -> None:
    async with get_session() as db:
        if (await db.execute(select(Tool.id).limit(1))).first() is None:
            db.add_all(Tool(**t) for t in TOOLS)
            logger.info("seeded_tools", count=len(TOOLS))
        if (await db.execute(select(SystemLog.id).limit(1))).first() is None:
            db.add_all(SystemLog(**entry) for entry in LOGS)
            logger.info("seeded_logs", count=len(LOGS))
        if (await db.execute(select(Incident.id).limit(1))).first() is None:
            incident = await create_incident(db, IncidentCreate.model_validate(INCIDENT))
            db.add(ChatMessage(
                channel="incidents",
                user_name="J. Doe",
                user_role="SOC Analyst",
                message=f"Opened {incident.reference_id}, looking at the proxy logs now.",
                incident_reference=incident.reference_id,
            ))
    logger.info("seed_complete")


if __name__ == "__main__":
    setup_logging(level="DEBUG")
    asyncio.run(seed())
