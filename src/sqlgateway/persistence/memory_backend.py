"""In-memory driver fakes for unit tests: canned results, recorded calls."""

from __future__ import annotations

import asyncio
from typing import Any

from sqlgateway.core.types import Row


class MemoryConnection:
    """Canned-response IConnection.

    ``rows`` and ``status`` are keyed by query text; ``error`` is raised from
    every call when set.
    """

    def __init__(self) -> None:
        self.rows: dict[str, list[Row]] = {}
        self.status: dict[str, str | None] = {}
        self.error: BaseException | None = None
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []

    async def execute(self, query: str, *args: Any) -> str | None:
        self.calls.append(("execute", query, args))
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.status.get(query)

    async def fetch(self, query: str, *args: Any) -> list[Row]:
        self.calls.append(("fetch", query, args))
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.rows.get(query, [])


class MemoryPool:
    """IConnectionPool handing out MemoryConnections.

    By default every acquire returns the same ``connection``; with
    ``shared=False`` each acquire gets a fresh one, kept in ``connections``.
    """

    def __init__(self, connection: MemoryConnection | None = None, shared: bool = True) -> None:
        self.connection = connection or MemoryConnection()
        self.shared = shared
        self.connections: list[MemoryConnection] = []
        self.max_in_use = 0
        self.create_kwargs: list[dict[str, Any]] = []
        self.acquired = 0
        self.released = 0
        self.released_connections: list[MemoryConnection] = []
        self.closed = 0
        self.close_error: BaseException | None = None

    @property
    def in_use(self) -> int:
        return self.acquired - self.released

    async def factory(self, **kwargs: Any) -> MemoryPool:
        """Drop-in for ``asyncpg.create_pool``; records the pool arguments."""
        self.create_kwargs.append(kwargs)
        return self

    async def acquire(self) -> MemoryConnection:
        self.acquired += 1
        self.max_in_use = max(self.max_in_use, self.in_use)
        conn = self.connection if self.shared else MemoryConnection()
        self.connections.append(conn)
        return conn

    async def release(self, connection: MemoryConnection) -> None:
        self.released += 1
        self.released_connections.append(connection)

    async def close(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error


class RecordingLogger:
    """ILogger that keeps (level, rendered message) pairs."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, msg: str, args: tuple[Any, ...]) -> None:
        self.records.append((level, msg % args if args else msg))

    def error(self, msg: str, *args: Any) -> None:
        self._record("error", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._record("debug", msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._record("info", msg, args)

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]
