"""Protocol interfaces for the gateway's external collaborators.

Structural typing only: an asyncpg pool and a ``logging.Logger`` satisfy these
without adapters, and the in-memory fakes satisfy them for unit tests.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------

@runtime_checkable
class ILogger(Protocol):
    """Capability set the gateway reports through."""

    def error(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...

    def info(self, msg: str, *args: Any) -> None: ...


# ---------------------------------------------------------------------------
# Driver: pooled connection
# ---------------------------------------------------------------------------

@runtime_checkable
class IConnection(Protocol):
    """A single pooled connection (asyncpg.Connection compatible)."""

    async def execute(self, query: str, *args: Any) -> str | None: ...

    async def fetch(self, query: str, *args: Any) -> list[Any]: ...


# ---------------------------------------------------------------------------
# Driver: connection pool
# ---------------------------------------------------------------------------

@runtime_checkable
class IConnectionPool(Protocol):
    """Connection pool (asyncpg.Pool compatible)."""

    async def acquire(self) -> IConnection: ...

    async def release(self, connection: IConnection) -> None: ...

    async def close(self) -> None: ...
