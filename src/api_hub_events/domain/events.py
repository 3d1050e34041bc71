"""Domain models for audit events."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum


class EntityType(StrEnum):
    """Kind of entity an event is recorded against."""

    APPLICATION = "APPLICATION"
    ACCESS_REQUEST = "ACCESSREQUEST"
    TEAM = "TEAM"
    API = "API"


class EventType(StrEnum):
    """Lifecycle action recorded by an event."""

    API_ADDED = "API_ADDED"
    EGRESS_ADDED = "EGRESS_ADDED"
    MEMBER_ADDED = "MEMBER_ADDED"
    APPROVED = "APPROVED"
    CANCELED = "CANCELED"
    TEAM_CHANGED = "TEAM_CHANGED"
    CREATED = "CREATED"
    CREDENTIAL_CREATED = "CREDENTIAL_CREATED"
    DELETED = "DELETED"
    SCOPES_FIXED = "SCOPES_FIXED"
    PROMOTED = "PROMOTED"
    REGISTERED = "REGISTERED"
    REJECTED = "REJECTED"
    API_REMOVED = "API_REMOVED"
    EGRESS_REMOVED = "EGRESS_REMOVED"
    MEMBER_REMOVED = "MEMBER_REMOVED"
    RENAMED = "RENAMED"
    CREDENTIAL_REVOKED = "CREDENTIAL_REVOKED"
    UPDATED = "UPDATED"


@dataclass(frozen=True)
class Parameter:
    """Named value attached to an event."""

    name: str
    value: str | None

    @classmethod
    def of(cls, name: str, value: object | None) -> "Parameter":
        """Build a parameter, rendering non-string values as text."""
        if value is None or isinstance(value, str):
            return cls(name=name, value=value)
        return cls(name=name, value=str(value))


@dataclass(frozen=True)
class Event:
    """Audit record of a lifecycle action taken on an entity."""

    entity_id: str
    entity_type: EntityType
    event_type: EventType
    user: str
    timestamp: datetime
    description: str
    detail: str
    parameters: tuple[Parameter, ...]
    id: str | None = None

    def with_id(self, event_id: str) -> "Event":
        """Return a copy of the event carrying its persisted id."""
        return replace(self, id=event_id)

    def parameters_map(self) -> dict[str, str | None]:
        """Return parameters keyed by name, in event order."""
        return {parameter.name: parameter.value for parameter in self.parameters}

    def to_record(self) -> dict[str, object]:
        """Serialize the event into a JSON-friendly record."""
        return {
            "entityId": self.entity_id,
            "entityType": str(self.entity_type),
            "eventType": str(self.event_type),
            "user": self.user,
            "timestamp": self.timestamp.isoformat(),
            "description": self.description,
            "detail": self.detail,
            "parameters": self.parameters_map(),
        }


def new_event(  # noqa: PLR0913
    entity_id: str,
    entity_type: EntityType,
    event_type: EventType,
    user: str,
    timestamp: datetime,
    description: str,
    detail: str,
    *parameters: Parameter,
) -> Event:
    """Create a new, unsaved event with parameters in the order given."""
    return Event(
        entity_id=entity_id,
        entity_type=entity_type,
        event_type=event_type,
        user=user,
        timestamp=timestamp,
        description=description,
        detail=detail,
        parameters=tuple(parameters),
    )
