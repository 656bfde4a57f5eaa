"""PostgreSQL statement gateway backed by an asyncpg connection pool."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from enum import StrEnum
from types import TracebackType
from typing import Any

import asyncpg

from sqlgateway.core.console_logger import ConsoleLogger
from sqlgateway.core.exceptions import GatewayClosedError
from sqlgateway.core.protocols import IConnection, IConnectionPool, ILogger
from sqlgateway.core.types import Params, Row
from sqlgateway.models.options import ConnectionOptions
from sqlgateway.models.statement import CommandClass, StatementRequest, classify_statement

PoolFactory = Callable[..., Awaitable[IConnectionPool]]


class GatewayState(StrEnum):
    OPEN = "open"
    CLOSING = "closing"
    CLOSED = "closed"


def parse_row_count(status: str | None) -> int:
    """Affected-row count from a command status tag, 0 when absent.

    asyncpg returns e.g. "UPDATE 3", "DELETE 0" or "INSERT 0 1".
    """
    if not status:
        return 0
    parts = status.split()
    if len(parts) >= 2 and parts[-1].isdigit():
        return int(parts[-1])
    return 0


class StatementGateway:
    """Executes classified SQL statements over pooled connections.

    Each ``execute_*`` method only accepts statements of its own command class,
    checked before any connection is acquired. Driver errors are logged and
    re-raised unchanged.
    """

    def __init__(
        self,
        options: ConnectionOptions,
        logger: ILogger | None = None,
        pool_factory: PoolFactory = asyncpg.create_pool,
    ) -> None:
        self._options = options
        self._logger: ILogger = logger if logger is not None else ConsoleLogger()
        self._pool_factory = pool_factory
        self._pool: IConnectionPool | None = None
        self._pool_lock = asyncio.Lock()
        self._state = GatewayState.OPEN

    @property
    def state(self) -> GatewayState:
        return self._state

    @property
    def logger(self) -> ILogger:
        return self._logger

    async def __aenter__(self) -> StatementGateway:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    # ------------------------------------------------------------------
    # Pool and connection handling
    # ------------------------------------------------------------------

    async def _get_pool(self) -> IConnectionPool:
        async with self._pool_lock:
            if self._pool is None:
                # Transport encryption is always on, whatever the options say.
                kwargs: dict[str, Any] = {**self._options.to_pool_kwargs(), "ssl": True}
                self._logger.debug(
                    "Creating connection pool for %s@%s:%s/%s",
                    self._options.user, self._options.host,
                    self._options.port, self._options.database,
                )
                self._pool = await self._pool_factory(**kwargs)
            return self._pool

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[IConnection]:
        pool = await self._get_pool()
        conn = await pool.acquire()
        try:
            yield conn
        finally:
            await pool.release(conn)

    def _check_open(self) -> None:
        if self._state is not GatewayState.OPEN:
            raise GatewayClosedError(self._state.value)

    def _prepare(self, command_class: CommandClass, request: StatementRequest) -> tuple[str, list[Any]]:
        self._check_open()
        classify_statement(request.statement, command_class)
        return request.bind()

    # ------------------------------------------------------------------
    # Statement execution
    # ------------------------------------------------------------------

    async def execute_schema_change(self, statement: str, params: Params | None = None) -> None:
        """Execute a CREATE, ALTER, DROP or TRUNCATE statement."""
        label = CommandClass.SCHEMA_CHANGE
        request = StatementRequest(statement=statement, params=list(params or []))
        query, args = self._prepare(label, request)
        async with self._connection() as conn:
            self._logger.debug("Executing %s statement with %d parameter(s)", label, len(args))
            try:
                await conn.execute(query, *args)
            except Exception as exc:
                self._logger.error("Error executing %s query: %s", label, exc)
                raise
        self._logger.info("%s query executed successfully.", label)

    async def execute_query(
        self,
        statement: str,
        params: Params | None = None,
        paginate: bool = False,
        page_size: int = 10,
        page_number: int = 1,
    ) -> list[Row]:
        """Execute a SELECT statement and return its rows as dicts.

        Args:
            statement: SELECT statement using ``$n`` placeholders.
            params: Values bound to the placeholders.
            paginate: Append ``LIMIT``/``OFFSET`` for the requested page.
            page_size: Rows per page.
            page_number: 1-based page number.
        """
        label = CommandClass.QUERY
        request = StatementRequest(
            statement=statement,
            params=list(params or []),
            paginate=paginate,
            page_size=page_size,
            page_number=page_number,
        )
        query, args = self._prepare(label, request)
        async with self._connection() as conn:
            self._logger.debug("Executing %s statement with %d parameter(s)", label, len(args))
            try:
                rows = await conn.fetch(query, *args)
            except Exception as exc:
                self._logger.error("Error executing %s query: %s", label, exc)
                raise
        self._logger.info("%s query executed successfully.", label)
        return [dict(r) for r in rows]

    async def execute_mutation(self, statement: str, params: Params | None = None) -> int:
        """Execute an INSERT, UPDATE or DELETE statement; returns rows affected."""
        label = CommandClass.MUTATION
        request = StatementRequest(statement=statement, params=list(params or []))
        query, args = self._prepare(label, request)
        async with self._connection() as conn:
            self._logger.debug("Executing %s statement with %d parameter(s)", label, len(args))
            try:
                status = await conn.execute(query, *args)
            except Exception as exc:
                self._logger.error("Error executing %s query: %s", label, exc)
                raise
        self._logger.info("%s query executed successfully.", label)
        return parse_row_count(status)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    async def shutdown(self) -> None:
        """Close the pool, waiting for checked-out connections to be released."""
        if self._state is not GatewayState.OPEN:
            self._logger.debug("Connection pool already %s", self._state.value)
            return
        self._state = GatewayState.CLOSING
        try:
            async with self._pool_lock:
                if self._pool is not None:
                    await self._pool.close()
        except Exception as exc:
            self._logger.error("Error closing connection pool: %s", exc)
            raise
        finally:
            self._state = GatewayState.CLOSED
        self._logger.info("Connection pool closed.")
