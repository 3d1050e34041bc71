"""Domain models for API deployments."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EgressMapping:
    """Maps an egress prefix onto the path sent to the backend."""

    prefix: str
    egress_prefix: str


@dataclass(frozen=True)
class RedeploymentRequest:
    """Request to redeploy an existing API."""

    description: str
    oas: str
    status: str
    domain: str
    sub_domain: str
    base_path: str
    hods: tuple[str, ...] = ()
    prefixes_to_remove: tuple[str, ...] = ()
    egress_mappings: tuple[EgressMapping, ...] | None = None
    egress: str | None = None


@dataclass(frozen=True)
class SuccessfulDeploymentsResponse:
    """Result of a successful deployment."""

    id: str
    version: str
    merge_request_iid: int
    uri: str = field(default="")
