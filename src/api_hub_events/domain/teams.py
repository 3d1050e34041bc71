"""Domain models for teams."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class TeamType(StrEnum):
    """Whether a team consumes or produces APIs."""

    CONSUMER = "consumer"
    PRODUCER = "producer"


class TeamIdMissingError(ValueError):
    """Raised when an unsaved team is used where an id is required."""


@dataclass(frozen=True)
class TeamMember:
    """Member of a team."""

    email: str


@dataclass(frozen=True)
class Team:
    """Team owning applications and APIs."""

    id: str | None
    name: str
    created: datetime
    team_members: tuple[TeamMember, ...] = ()
    team_type: TeamType = TeamType.CONSUMER
    egresses: tuple[str, ...] = ()

    @property
    def safe_id(self) -> str:
        """Return the team id, failing if the team was never saved."""
        if self.id is None:
            raise TeamIdMissingError(f"Team {self.name!r} has no id")
        return self.id
