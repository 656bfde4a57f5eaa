"""Default logger used when the caller does not inject one."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleLogger:
    """ILogger writing to standard output.

    Wraps a private ``logging.Logger`` that is not registered with the logging
    manager, so creating one never touches global logging configuration.
    """

    def __init__(
        self, name: str = "sqlgateway", level: str | int = "INFO", stream: TextIO | None = None,
    ) -> None:
        self._logger = logging.Logger(name, level=level)
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._logger.addHandler(handler)

    @property
    def level(self) -> int:
        return self._logger.level

    def error(self, msg: str, *args: Any) -> None:
        self._logger.error(msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        self._logger.debug(msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._logger.info(msg, *args)
