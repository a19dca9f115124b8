# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter — renders pyfetch log records through structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from pyfetch.config.properties.logging import LoggingProperties
from pyfetch.core.config import Config

_HANDLER_NAME = "pyfetch"


class StructlogAdapter:
    """Route stdlib and structlog events through one structlog renderer.

    pyfetch modules log with ``logging.getLogger(__name__)``, and httpx does
    the same. :meth:`configure` installs a
    :class:`structlog.stdlib.ProcessorFormatter` on a root handler, so those
    records and events from :meth:`get_logger` come out in the same console
    or JSON format. Levels are taken from ``pyfetch.logging.level``: ``root``
    for the root logger, any other key names a logger.

    Args:
        stream: Where rendered lines are written. Defaults to ``sys.stdout``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._handler: logging.Handler | None = None
        self.properties = LoggingProperties()

    def configure(self, config: Config) -> None:
        """Apply ``pyfetch.logging.*`` from *config*.

        Replaces the handler of any earlier :meth:`configure` call.
        """
        self.properties = config.bind(LoggingProperties)
        levels = {str(k): str(v) for k, v in self.properties.level.items()}
        root_level = levels.pop("root", "INFO")

        pre_chain = self._pre_chain()
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *pre_chain,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

        handler = logging.StreamHandler(self._stream or sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=pre_chain,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    self._renderer(),
                ],
            )
        )
        root = logging.getLogger()
        # one pyfetch handler on the root logger, whichever adapter installed it
        for existing in list(root.handlers):
            if existing.get_name() == _HANDLER_NAME:
                root.removeHandler(existing)
        root.addHandler(handler)
        self._handler = handler

        self.set_level("", root_level)
        for name, level in levels.items():
            self.set_level(name, level)

    def close(self) -> None:
        """Detach the handler installed by :meth:`configure`."""
        if self._handler is not None:
            logging.getLogger().removeHandler(self._handler)
            self._handler = None

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the level of a stdlib logger; ``""`` is the root logger."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    @staticmethod
    def _pre_chain() -> list[structlog.types.Processor]:
        return [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

    def _renderer(self) -> structlog.types.Processor:
        if self.properties.format.lower() == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer(colors=False)
