"""Command-class-checked statement gateway over an asyncpg connection pool."""

from __future__ import annotations

from sqlgateway.core.exceptions import GatewayClosedError, InvalidCommandError, SQLGatewayError
from sqlgateway.models.options import ConnectionOptions
from sqlgateway.models.statement import CommandClass, StatementRequest, classify_statement
from sqlgateway.persistence import GatewayState, StatementGateway, create_gateway

__all__ = [
    "CommandClass",
    "ConnectionOptions",
    "GatewayClosedError",
    "GatewayState",
    "InvalidCommandError",
    "SQLGatewayError",
    "StatementGateway",
    "StatementRequest",
    "classify_statement",
    "create_gateway",
]
