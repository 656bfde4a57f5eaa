"""Connection options consumed once to build the pool."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ConnectionOptions(BaseModel):
    """Immutable PostgreSQL connection options."""

    model_config = ConfigDict(frozen=True)

    user: str
    host: str
    database: str
    password: str
    port: int = 5432
    min_size: int | None = None
    max_size: int | None = None
    command_timeout: float | None = None

    def to_pool_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``asyncpg.create_pool``; unset sizing is omitted."""
        return self.model_dump(exclude_none=True)
