"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from api_hub_events.config import Settings
from api_hub_events.domain.apis import (
    RedeploymentRequest,
    SuccessfulDeploymentsResponse,
)
from api_hub_events.domain.environments import HipEnvironments
from api_hub_events.domain.events import EntityType, Event
from api_hub_events.domain.teams import Team
from api_hub_events.services.api_events import EventLogger
from api_hub_events.services.events import EventsRepository


@dataclass
class RecordingEventLogger(EventLogger):
    """Event logger that keeps every event it is given."""

    events: list[Event] = field(default_factory=list)

    async def log(self, event: Event) -> None:
        self.events.append(event)


class LoggingFailedError(RuntimeError):
    """Raised by the failing event logger."""


@dataclass
class FailingEventLogger(EventLogger):
    """Event logger that always fails."""

    error: Exception = field(default_factory=lambda: LoggingFailedError("boom"))
    calls: int = 0

    async def log(self, event: Event) -> None:
        self.calls += 1
        raise self.error


@dataclass
class FailingEventsRepository(EventsRepository):
    """Repository whose inserts always fail."""

    inserts: int = 0

    async def insert(self, event: Event) -> Event:
        self.inserts += 1
        raise ConnectionError("database unavailable")

    async def find_by_id(self, event_id: str) -> Event | None:
        return None

    async def find_by_entity(
        self, entity_type: EntityType, entity_id: str
    ) -> list[Event]:
        return []

    async def find_by_user(self, user: str) -> list[Event]:
        return []


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def hip_environments(settings: Settings) -> HipEnvironments:
    return HipEnvironments(settings.hip_environments)


@pytest.fixture
def timestamp() -> datetime:
    return datetime(2025, 3, 14, 9, 26, 53)


@pytest.fixture
def redeployment_request() -> RedeploymentRequest:
    return RedeploymentRequest(
        description="",
        oas="",
        status="test-status",
        domain="",
        sub_domain="",
        base_path="test-base-path",
        egress="test-egress",
    )


@pytest.fixture
def deployments_response() -> SuccessfulDeploymentsResponse:
    return SuccessfulDeploymentsResponse(
        id="",
        version="test-deployment-version",
        merge_request_iid=101,
        uri="",
    )


@pytest.fixture
def team(timestamp: datetime) -> Team:
    return Team(id="test-team-id", name="test-team-name", created=timestamp)


@pytest.fixture
def old_team(timestamp: datetime) -> Team:
    return Team(id="test-old-team-id", name="test-old-team-name", created=timestamp)
