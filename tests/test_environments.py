"""Tests for HIP environment configuration."""

import pytest

from api_hub_events.config import BaseHipEnvironment
from api_hub_events.domain.environments import (
    HipEnvironmentNotFoundError,
    HipEnvironments,
)


def test_default_environments(hip_environments: HipEnvironments) -> None:
    production = hip_environments.production_environment
    test = hip_environments.for_id("test")

    assert [environment.id for environment in hip_environments.environments] == [
        "production",
        "test",
    ]
    assert production.is_production_like
    assert test.promote_to == production
    assert hip_environments.deployment_environment == test


def test_unknown_environment(hip_environments: HipEnvironments) -> None:
    with pytest.raises(HipEnvironmentNotFoundError):
        hip_environments.for_id("nowhere")


def test_unknown_promotion_target_rejected() -> None:
    with pytest.raises(ValueError, match="unknown"):
        HipEnvironments(
            [BaseHipEnvironment(id="test", name="Test", rank=2, promote_to="prod")]
        )


def test_promotion_to_higher_rank_rejected() -> None:
    with pytest.raises(ValueError, match="lower rank"):
        HipEnvironments(
            [
                BaseHipEnvironment(id="production", name="Production", rank=1),
                BaseHipEnvironment(
                    id="production-like",
                    name="Production Like",
                    rank=2,
                    promote_to="test",
                ),
                BaseHipEnvironment(id="test", name="Test", rank=3),
            ]
        )


def test_settings_read_environments_from_env(monkeypatch) -> None:
    from api_hub_events.config import Settings

    monkeypatch.setenv(
        "HIP_ENVIRONMENTS",
        '[{"id": "live", "name": "Live", "rank": 1, "is_production_like": true}]',
    )

    environments = HipEnvironments(Settings().hip_environments)

    assert environments.production_environment.id == "live"
    assert environments.deployment_environment.id == "live"
