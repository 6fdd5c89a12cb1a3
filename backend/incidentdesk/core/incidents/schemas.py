import uuid
from datetime import datetime
from enum import Enum
from pydantic import AliasChoices, BaseModel, Field, field_validator
from incidentdesk.core.incidents.reference import is_reference_id


class Severity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class IncidentStatus(str, Enum):
    OPEN = "Open"
    INVESTIGATING = "Investigating"
    CONTAINED = "Contained"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


ACTIVE_STATUSES = (IncidentStatus.OPEN, IncidentStatus.INVESTIGATING)


class EvidenceType(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    LOG = "log"


class TimelineEventType(str, Enum):
    DETECTION = "detection"
    ANALYSIS = "analysis"
    CONTAINMENT = "containment"
    ERADICATION = "eradication"
    RECOVERY = "recovery"


class IncidentTool(BaseModel):
    name: str
    description: str
    impact: str


class Evidence(BaseModel):
    id: str
    type: EvidenceType
    name: str
    url: str


class TimelineEvent(BaseModel):
    id: str
    timestamp: str
    action: str
    description: str
    user: str
    type: TimelineEventType


def _either_case(snake: str, camel: str) -> AliasChoices:
    return AliasChoices(camel, snake)


class IncidentCreate(BaseModel):
    reference_id: str | None = Field(
        None, validation_alias=_either_case("reference_id", "referenceId"),
    )
    title: str = Field(..., min_length=3, max_length=500)
    type: str = Field(..., min_length=2, max_length=100)
    severity: Severity
    status: IncidentStatus = IncidentStatus.OPEN
    description: str = Field(..., min_length=10)
    reporter: str = Field(..., max_length=255)
    assignee: str | None = Field(None, max_length=255)
    tools_used: list[IncidentTool] = Field(
        default_factory=list, validation_alias=_either_case("tools_used", "toolsUsed"),
    )
    evidence: list[Evidence] = Field(default_factory=list)
    timeline: list[TimelineEvent] = Field(default_factory=list)

    @field_validator("reference_id")
    @classmethod
    def check_reference_format(cls, v: str | None) -> str | None:
        if v is not None and not is_reference_id(v):
            raise ValueError("must look like INC-<year>-<3 digits>")
        return v


class IncidentUpdate(BaseModel):
    """Partial update. Only keys present in the payload are applied.

    reference_id is not accepted here; unknown keys are ignored.
    """
    title: str | None = Field(None, min_length=3, max_length=500)
    type: str | None = Field(None, min_length=2, max_length=100)
    severity: Severity | None = None
    status: IncidentStatus | None = None
    description: str | None = Field(None, min_length=10)
    reporter: str | None = Field(None, max_length=255)
    assignee: str | None = Field(None, max_length=255)
    tools_used: list[IncidentTool] | None = Field(
        None, validation_alias=_either_case("tools_used", "toolsUsed"),
    )
    evidence: list[Evidence] | None = None
    timeline: list[TimelineEvent] | None = None


class IncidentRead(BaseModel):
    model_config = {"from_attributes": True}
    id: uuid.UUID
    reference_id: str
    title: str
    type: str
    severity: Severity
    status: IncidentStatus
    description: str | None
    reporter: str | None
    assignee: str | None
    tools_used: list[IncidentTool]
    evidence: list[Evidence]
    timeline: list[TimelineEvent]
    created_at: datetime
    updated_at: datetime
