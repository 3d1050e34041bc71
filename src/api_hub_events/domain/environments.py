"""Deployment environments an API can be published to."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from api_hub_events.config import BaseHipEnvironment


class HipEnvironmentNotFoundError(LookupError):
    """Raised when no environment exists for an id."""


@dataclass(frozen=True)
class HipEnvironment:
    """Deployment target environment."""

    id: str
    name: str
    rank: int
    is_production_like: bool
    promote_to: "HipEnvironment | None" = None


class HipEnvironments:
    """Registry of configured environments, ordered by rank."""

    def __init__(self, base_environments: "Iterable[BaseHipEnvironment]") -> None:
        bases = sorted(base_environments, key=lambda base: base.rank)
        known = {base.id for base in bases}
        for base in bases:
            if base.promote_to is not None and base.promote_to not in known:
                raise ValueError(
                    f"Environment {base.id!r} promotes to unknown {base.promote_to!r}"
                )

        # Promotion targets have a lower rank and resolve first.
        resolved: dict[str, HipEnvironment] = {}
        for base in bases:
            promote_to = resolved.get(base.promote_to) if base.promote_to else None
            if base.promote_to is not None and promote_to is None:
                raise ValueError(
                    f"Environment {base.id!r} must promote to a lower rank"
                )
            resolved[base.id] = HipEnvironment(
                id=base.id,
                name=base.name,
                rank=base.rank,
                is_production_like=base.is_production_like,
                promote_to=promote_to,
            )
        self._environments = resolved

    @property
    def environments(self) -> list[HipEnvironment]:
        """Return all environments, production first."""
        return list(self._environments.values())

    def for_id(self, environment_id: str) -> HipEnvironment:
        """Return the environment with the given id."""
        environment = self._environments.get(environment_id)
        if environment is None:
            raise HipEnvironmentNotFoundError(
                f"Unknown HIP environment: {environment_id}"
            )
        return environment

    @property
    def production_environment(self) -> HipEnvironment:
        """Return the rank one environment."""
        for environment in self._environments.values():
            if environment.rank == 1:
                return environment
        raise HipEnvironmentNotFoundError("No production environment configured")

    @property
    def deployment_environment(self) -> HipEnvironment:
        """Return the environment new deployments land in."""
        if not self._environments:
            raise HipEnvironmentNotFoundError("No environments configured")
        return self.environments[-1]
