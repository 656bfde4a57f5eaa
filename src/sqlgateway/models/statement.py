"""Statement command classes, classification and the per-call request."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sqlgateway.core.exceptions import InvalidCommandError


class CommandClass(StrEnum):
    """Statement classes; the value is the label used in log messages."""

    SCHEMA_CHANGE = "DDL"
    QUERY = "DQL"
    MUTATION = "DML"

    @property
    def allowed_commands(self) -> tuple[str, ...]:
        return _ALLOWED_COMMANDS[self]


_ALLOWED_COMMANDS: dict[CommandClass, tuple[str, ...]] = {
    CommandClass.SCHEMA_CHANGE: ("CREATE", "ALTER", "DROP", "TRUNCATE"),
    CommandClass.QUERY: ("SELECT",),
    CommandClass.MUTATION: ("INSERT", "UPDATE", "DELETE"),
}


def leading_command(statement: str) -> str:
    """Upper-cased first whitespace-delimited token, or "" for blank text."""
    tokens = statement.split(maxsplit=1)
    return tokens[0].upper() if tokens else ""


def classify_statement(statement: str, command_class: CommandClass) -> str:
    """Return the statement's command, raising InvalidCommandError if not allowed."""
    command = leading_command(statement)
    if command not in command_class.allowed_commands:
        raise InvalidCommandError(command, command_class.allowed_commands)
    return command


class StatementRequest(BaseModel):
    """A statement with its bound parameters and optional pagination.

    Validation is strict: arguments are never coerced, so a page size of "5" or
    2.5 raises ``pydantic.ValidationError`` before any connection is acquired.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    statement: str
    params: list[Any] = Field(default_factory=list)
    paginate: bool = False
    page_size: int = 10
    page_number: int = 1  # <= 0 yields a negative offset, passed through as-is

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    def bind(self) -> tuple[str, list[Any]]:
        """Statement text and parameter list to hand to the driver.

        Pagination placeholders continue numbering after the caller's own
        parameters so they never collide with existing ``$n`` markers.
        """
        params = list(self.params)
        if not self.paginate:
            return self.statement, params
        n = len(params)
        statement = f"{self.statement} LIMIT ${n + 1} OFFSET ${n + 2}"
        return statement, [*params, self.page_size, self.offset]
