"""PostgreSQL statement gateway and its factory."""

from __future__ import annotations

from sqlgateway.core.config import GatewaySettings
from sqlgateway.core.console_logger import ConsoleLogger
from sqlgateway.core.protocols import ILogger
from sqlgateway.persistence.postgres_gateway import GatewayState, StatementGateway


def create_gateway(
    settings: GatewaySettings | None = None, logger: ILogger | None = None,
) -> StatementGateway:
    """Create a StatementGateway from application settings.

    The logger defaults to a ConsoleLogger at ``settings.log_level``.
    """
    if settings is None:
        settings = GatewaySettings()

    if logger is None:
        logger = ConsoleLogger(level=settings.log_level.upper())

    return StatementGateway(settings.database.to_connection_options(), logger)


__all__ = ["GatewayState", "StatementGateway", "create_gateway"]
