"""Audit events for API lifecycle actions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from api_hub_events.domain.apis import (
    RedeploymentRequest,
    SuccessfulDeploymentsResponse,
)
from api_hub_events.domain.environments import HipEnvironment
from api_hub_events.domain.events import (
    EntityType,
    Event,
    EventType,
    Parameter,
    new_event,
)
from api_hub_events.domain.teams import Team


class EventLogger(Protocol):
    """Sink that records audit events."""

    async def log(self, event: Event) -> None:
        """Record an event."""


@dataclass
class ApiEventService:
    """Builds and logs the audit events raised against APIs.

    Each operation forwards exactly one event to the logger and lets any
    error it raises reach the caller.
    """

    events: EventLogger

    async def update(  # noqa: PLR0913
        self,
        api_id: str,
        hip_environment: HipEnvironment,
        oas_version: str,
        request: RedeploymentRequest,
        response: SuccessfulDeploymentsResponse,
        user_email: str,
        timestamp: datetime,
    ) -> None:
        """Log that an API was redeployed to an environment."""
        await self.events.log(
            self._api_event(
                api_id,
                EventType.UPDATED,
                user_email,
                timestamp,
                Parameter.of("environmentId", hip_environment.id),
                Parameter.of("oasVersion", oas_version),
                Parameter.of("egress", request.egress),
                Parameter.of("status", request.status),
                Parameter.of("basePath", request.base_path),
                Parameter.of("deploymentVersion", response.version),
                Parameter.of("mergeRequestIid", response.merge_request_iid),
            )
        )

    async def promote(  # noqa: PLR0913
        self,
        api_id: str,
        from_environment: HipEnvironment,
        to_environment: HipEnvironment,
        oas_version: str,
        egress: str,
        response: SuccessfulDeploymentsResponse,
        user_email: str,
        timestamp: datetime,
    ) -> None:
        """Log that an API was promoted between environments."""
        await self.events.log(
            self._api_event(
                api_id,
                EventType.PROMOTED,
                user_email,
                timestamp,
                Parameter.of("fromEnvironmentId", from_environment.id),
                Parameter.of("toEnvironmentId", to_environment.id),
                Parameter.of("oasVersion", oas_version),
                Parameter.of("egress", egress),
                Parameter.of("deploymentVersion", response.version),
                Parameter.of("mergeRequestIid", response.merge_request_iid),
            )
        )

    async def change_team(  # noqa: PLR0913
        self,
        api_id: str,
        new_team: Team,
        old_team: Team | None,
        user_email: str,
        timestamp: datetime,
    ) -> None:
        """Log that ownership of an API moved to another team."""
        parameters = [
            Parameter.of("newTeamId", new_team.safe_id),
            Parameter.of("newTeamName", new_team.name),
        ]
        if old_team is not None:
            parameters.append(Parameter.of("oldTeamId", old_team.safe_id))
            parameters.append(Parameter.of("oldTeamName", old_team.name))

        await self.events.log(
            self._api_event(
                api_id, EventType.TEAM_CHANGED, user_email, timestamp, *parameters
            )
        )

    @staticmethod
    def _api_event(
        api_id: str,
        event_type: EventType,
        user_email: str,
        timestamp: datetime,
        *parameters: Parameter,
    ) -> Event:
        return new_event(
            api_id,
            EntityType.API,
            event_type,
            user_email,
            timestamp,
            "",
            "",
            *parameters,
        )
