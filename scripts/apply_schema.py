"""Apply a SQL schema file through the statement gateway.

Usage:
    SQLGATEWAY_DB_HOST=db.example.com python scripts/apply_schema.py --file schema.sql

Statements are split on ";" so function bodies containing semicolons are not
supported. Only schema-change statements (CREATE, ALTER, DROP, TRUNCATE) are
accepted; anything else aborts the run before touching the database.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from sqlgateway.core.config import GatewaySettings
from sqlgateway.models.statement import CommandClass, classify_statement
from sqlgateway.persistence import StatementGateway, create_gateway


def split_statements(sql: str) -> list[str]:
    """Split a script into statements, dropping blank and ``--`` comment lines."""
    lines = [
        line for line in sql.splitlines()
        if line.strip() and not line.strip().startswith("--")
    ]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


async def apply_schema(gateway: StatementGateway, sql: str) -> int:
    """Execute every statement in ``sql``; returns how many were applied."""
    statements = split_statements(sql)
    for stmt in statements:
        classify_statement(stmt, CommandClass.SCHEMA_CHANGE)

    for stmt in statements:
        await gateway.execute_schema_change(stmt)
    return len(statements)


async def _run(path: Path, settings: GatewaySettings) -> int:
    async with create_gateway(settings) as gateway:
        return await apply_schema(gateway, path.read_text())


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply a SQL schema file to PostgreSQL")
    parser.add_argument("--file", type=Path, required=True, help="Path to the .sql file")
    parser.add_argument("--log-level", default=None, help="Override SQLGATEWAY_LOG_LEVEL")
    args = parser.parse_args()

    settings = GatewaySettings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})

    count = asyncio.run(_run(args.file, settings))
    print(f"Applied {count} statement(s) from {args.file}")


if __name__ == "__main__":
    main()
