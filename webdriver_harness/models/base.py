"""Base model configuration for connection settings."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model for settings derived from the harness configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")
