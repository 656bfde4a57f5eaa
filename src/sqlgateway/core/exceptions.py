"""sqlgateway exception hierarchy.

Driver failures are deliberately absent: they propagate as the driver's own
exception types and never derive from ``SQLGatewayError``.
"""

from __future__ import annotations

from collections.abc import Iterable


class SQLGatewayError(Exception):
    """Base exception for all gateway errors."""


class InvalidCommandError(SQLGatewayError):
    """Statement's leading keyword is not allowed for the invoked method."""

    def __init__(self, command: str, allowed: Iterable[str]) -> None:
        self.command = command
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid SQL command: {command}. Allowed commands are: {', '.join(self.allowed)}"
        )


class GatewayClosedError(SQLGatewayError):
    """Statement execution attempted after the pool was shut down."""

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Gateway is {state}; no statements can be executed")
