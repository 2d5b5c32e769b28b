"""Configuration management for the image ledger."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerConfig(BaseModel):
    """Ledger bootstrap configuration."""

    seed_on_start: bool = Field(
        default=False, description="Invoke initLedger when the gateway starts"
    )


class ServerConfig(BaseModel):
    """Development gateway configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")
    metrics_enabled: bool = Field(default=False, description="Start the Prometheus exporter")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="image_ledger", description="Service name for tracing")
    trace_console: bool = Field(
        default=False, description="Also export spans to stdout for debugging"
    )


class Config(BaseSettings):
    """Main configuration for the image ledger."""

    model_config = SettingsConfigDict(
        env_prefix="IMAGE_LEDGER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
