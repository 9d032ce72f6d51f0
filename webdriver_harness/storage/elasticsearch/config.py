"""Configuration for Elasticsearch result storage."""

from pydantic import Field, SecretStr, field_validator

from webdriver_harness.config import HarnessConfig
from webdriver_harness.models.base import Model

PROPERTY_PREFIX = "elasticsearch_"


class ElasticsearchConfig(Model):
    """Connection settings for the Elasticsearch result index."""

    url: str = Field(default="http://localhost:9200/", description="Cluster URL")
    index: str = Field(default="webdriver-results", description="Result index")
    api_key: SecretStr | None = None
    username: str | None = None
    password: SecretStr | None = None

    @field_validator("url")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        """Keep path prefixes when joining relative request paths."""
        return value if value.endswith("/") else f"{value}/"

    @classmethod
    def from_harness_config(cls, config: HarnessConfig) -> "ElasticsearchConfig":
        """Read ``elasticsearch_*`` properties; unset ones keep their defaults."""
        values = {
            name: config.get_property(PROPERTY_PREFIX + name, "")
            for name in cls.model_fields
        }
        return cls(**{name: value for name, value in values.items() if value != ""})
