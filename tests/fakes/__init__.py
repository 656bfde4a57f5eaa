"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from sqlgateway.persistence.memory_backend import (
    MemoryConnection,
    MemoryPool,
    RecordingLogger,
)

__all__ = ["MemoryConnection", "MemoryPool", "RecordingLogger"]
