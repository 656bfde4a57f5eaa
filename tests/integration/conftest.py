"""Integration test fixtures: a live PostgreSQL reachable over SSL."""

from __future__ import annotations

import os

import pytest

from sqlgateway.core.config import DatabaseConfig

skip_no_postgres = pytest.mark.skipif(
    not os.environ.get("SQLGATEWAY_TEST_HOST"),
    reason="SQLGATEWAY_TEST_HOST not set",
)


@pytest.fixture
def live_options():
    """Connection options for the test database (SQLGATEWAY_TEST_* env vars)."""
    return DatabaseConfig(
        host=os.environ.get("SQLGATEWAY_TEST_HOST", "localhost"),
        port=int(os.environ.get("SQLGATEWAY_TEST_PORT", "5432")),
        user=os.environ.get("SQLGATEWAY_TEST_USER", "postgres"),
        password=os.environ.get("SQLGATEWAY_TEST_PASSWORD", ""),
        database=os.environ.get("SQLGATEWAY_TEST_DATABASE", "postgres"),
        max_size=2,
    ).to_connection_options()
