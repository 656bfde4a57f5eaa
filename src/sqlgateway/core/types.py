"""Type aliases used across sqlgateway."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Row = dict[str, Any]
Params = Sequence[Any]
