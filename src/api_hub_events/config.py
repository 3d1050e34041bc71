"""Application configuration."""

import os

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class BaseHipEnvironment(BaseModel):
    """Environment definition as it appears in configuration."""

    id: str
    name: str
    rank: int
    is_production_like: bool = False
    promote_to: str | None = None


def _default_hip_environments() -> list[BaseHipEnvironment]:
    return [
        BaseHipEnvironment(
            id="production",
            name="Production",
            rank=1,
            is_production_like=True,
        ),
        BaseHipEnvironment(
            id="test",
            name="Test",
            rank=2,
            promote_to="production",
        ),
    ]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    events_enabled: bool = True
    environment: str = _ENVIRONMENT
    hip_environments: list[BaseHipEnvironment] = Field(
        default_factory=_default_hip_environments
    )

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
