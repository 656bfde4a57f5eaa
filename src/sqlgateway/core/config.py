"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from sqlgateway.models.options import ConnectionOptions


class DatabaseConfig(BaseSettings):
    """PostgreSQL connection configuration."""

    model_config = {"env_prefix": "SQLGATEWAY_DB_"}

    user: str = "postgres"
    host: str = "localhost"
    database: str = "postgres"
    password: str = ""
    port: int = 5432
    min_size: int | None = None  # asyncpg default when unset
    max_size: int | None = None
    command_timeout: float | None = None

    def to_connection_options(self) -> ConnectionOptions:
        return ConnectionOptions(**self.model_dump())


class GatewaySettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SQLGATEWAY_"}

    log_level: str = "INFO"

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
