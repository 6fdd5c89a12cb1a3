"""Badge styles for enumerated fields.

Every lookup has an explicit ``DEFAULT`` arm for values outside the enum, so
a legacy or mistyped value renders with the neutral style instead of failing.
"""

from enum import Enum
from typing import TypeVar

from incidentdesk.core.incidents.schemas import IncidentStatus, Severity
from incidentdesk.core.logs.schemas import LogSeverity
from incidentdesk.core.tools.schemas import Effectiveness

E = TypeVar("E", bound=Enum)


class BadgeVariant(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    DEFAULT = "default"


SEVERITY_BADGES = {
    Severity.LOW: BadgeVariant.INFO,
    Severity.MEDIUM: BadgeVariant.WARNING,
    Severity.HIGH: BadgeVariant.DANGER,
    Severity.CRITICAL: BadgeVariant.DANGER,
}

STATUS_BADGES = {
    IncidentStatus.OPEN: BadgeVariant.DANGER,
    IncidentStatus.INVESTIGATING: BadgeVariant.WARNING,
    IncidentStatus.CONTAINED: BadgeVariant.INFO,
    IncidentStatus.RESOLVED: BadgeVariant.SUCCESS,
    IncidentStatus.CLOSED: BadgeVariant.DEFAULT,
}

LOG_SEVERITY_BADGES = {
    LogSeverity.INFO: BadgeVariant.INFO,
    LogSeverity.WARNING: BadgeVariant.WARNING,
    LogSeverity.ERROR: BadgeVariant.DANGER,
    LogSeverity.CRITICAL: BadgeVariant.DANGER,
}

EFFECTIVENESS_BADGES = {
    Effectiveness.CRITICAL: BadgeVariant.DANGER,
    Effectiveness.HIGH: BadgeVariant.WARNING,
    Effectiveness.MEDIUM: BadgeVariant.INFO,
    Effectiveness.LOW: BadgeVariant.DEFAULT,
}


def parse_enum(enum_cls: type[E], value) -> E | None:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _lookup(table: dict, enum_cls: type[Enum], value) -> BadgeVariant:
    member = parse_enum(enum_cls, value)
    if member is None:
        return BadgeVariant.DEFAULT
    return table[member]


def severity_badge(value) -> BadgeVariant:
    return _lookup(SEVERITY_BADGES, Severity, value)


def status_badge(value) -> BadgeVariant:
    return _lookup(STATUS_BADGES, IncidentStatus, value)


def log_severity_badge(value) -> BadgeVariant:
    return _lookup(LOG_SEVERITY_BADGES, LogSeverity, value)


def effectiveness_badge(value) -> BadgeVariant:
    return _lookup(EFFECTIVENESS_BADGES, Effectiveness, value)
