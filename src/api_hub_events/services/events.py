"""Audit event logging and lookup."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from api_hub_events.domain.events import EntityType, Event

_logger = logging.getLogger(__name__)


class EventsRepository(Protocol):
    """Persistence interface for audit events."""

    async def insert(self, event: Event) -> Event:
        """Store an event and return it with its id."""

    async def find_by_id(self, event_id: str) -> Event | None:
        """Return the event with the given id, if present."""

    async def find_by_entity(
        self, entity_type: EntityType, entity_id: str
    ) -> list[Event]:
        """Return events recorded against an entity."""

    async def find_by_user(self, user: str) -> list[Event]:
        """Return events raised by a user."""


@dataclass
class InMemoryEventsRepository(EventsRepository):
    """Process-local events repository."""

    events: list[Event] = field(default_factory=list)

    async def insert(self, event: Event) -> Event:
        stored = event.with_id(str(len(self.events) + 1))
        self.events.append(stored)
        return stored

    async def find_by_id(self, event_id: str) -> Event | None:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    async def find_by_entity(
        self, entity_type: EntityType, entity_id: str
    ) -> list[Event]:
        return [
            event
            for event in self.events
            if event.entity_type == entity_type and event.entity_id == entity_id
        ]

    async def find_by_user(self, user: str) -> list[Event]:
        return [event for event in self.events if event.user == user]


@dataclass
class EventsService:
    """Service for recording and querying audit events."""

    repository: EventsRepository
    enabled: bool = True

    async def log(self, event: Event) -> None:
        """Persist an event; storage failures are logged, not raised."""
        if not self.enabled:
            return
        try:
            await self.repository.insert(event)
        except Exception:
            _logger.warning(
                "Failed to log an event: entity_type=%s entity_id=%s event_type=%s",
                event.entity_type,
                event.entity_id,
                event.event_type,
                exc_info=True,
            )

    async def find_by_id(self, event_id: str) -> Event | None:
        """Return a single event by id."""
        return await self.repository.find_by_id(event_id)

    async def find_by_entity(
        self, entity_type: EntityType, entity_id: str
    ) -> list[Event]:
        """Return all events for an entity."""
        return await self.repository.find_by_entity(entity_type, entity_id)

    async def find_by_user(self, user: str) -> list[Event]:
        """Return all events raised by a user."""
        return await self.repository.find_by_user(user)
