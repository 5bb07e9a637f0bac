"""
Shared configuration management for the Event & Venue API.
"""

import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_EVENTS_DATA_URL = "https://teg-coding-challenge.s3.ap-southeast-2.amazonaws.com/events/event-data.json"
DEFAULT_EVENTS_SCHEMA_URL = "https://teg-coding-challenge.s3.ap-southeast-2.amazonaws.com/events/event-data.schema.json"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EVENTS_",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Remote event source
    data_url: str = Field(default=DEFAULT_EVENTS_DATA_URL)
    schema_url: str = Field(default=DEFAULT_EVENTS_SCHEMA_URL)
    fetch_timeout_seconds: float = Field(default=10.0, gt=0)

    # Retry policy
    retry_max_retries: int = Field(default=3, ge=0)
    retry_base_delay_seconds: float = Field(default=2.0, ge=0)
    retry_backoff_base: float = Field(default=2.0, ge=1)
    retry_validation_failures: bool = Field(default=True)

    # Snapshot cache
    cache_sliding_expiration_seconds: float = Field(default=600.0, gt=0)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    port = int(os.getenv("EVENTS_PORT", port))
    return ServiceConfig(service_name=service_name, port=port, **overrides)


def retry_attempts(config: BaseConfig) -> int:
    """Total tries per data cycle: the first attempt plus configured retries."""
    return config.retry_max_retries + 1


def describe(config: Optional[BaseConfig]) -> dict:
    """Non-secret view of the effective configuration, for startup logging."""
    if config is None:
        return {}
    return config.model_dump(exclude={"service_name"})
