"""Dependency container wiring for the application."""

from dataclasses import dataclass

from api_hub_events.config import Settings
from api_hub_events.domain.environments import HipEnvironments
from api_hub_events.services.api_events import ApiEventService
from api_hub_events.services.events import (
    EventsRepository,
    EventsService,
    InMemoryEventsRepository,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    hip_environments: HipEnvironments
    events_service: EventsService
    api_event_service: ApiEventService


def build_container(
    settings: Settings | None = None,
    repository: EventsRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if repository is None:
        repository = InMemoryEventsRepository()
    events_service = EventsService(
        repository=repository,
        enabled=resolved_settings.events_enabled,
    )
    return AppContainer(
        settings=resolved_settings,
        hip_environments=HipEnvironments(resolved_settings.hip_environments),
        events_service=events_service,
        api_event_service=ApiEventService(events_service),
    )
