"""
docshelf Logging — stdlib logging setup for the ``docshelf`` logger tree.

Implements:
- JsonLineFormatter: one compact JSON object per record
- configure_logging(): attach a single stream handler to the ``docshelf`` logger

Every module logs through ``logging.getLogger("docshelf.<module>")``; nothing
here is required for those loggers to work, it only decides where they go.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

from docshelf.engine.config import LoggingConfig, get_config

ROOT_LOGGER = "docshelf"
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Marks the handler we own so repeated configure calls replace it
_HANDLER_ATTR = "_docshelf_handler"


class JsonLineFormatter(logging.Formatter):
    """Format a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str, separators=(",", ":"))


def configure_logging(
    config: Optional[LoggingConfig] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Configure the ``docshelf`` logger from a LoggingConfig.

    Args:
        config: Logging settings. If None, taken from the loaded docshelf.yaml.
        stream: Destination stream. Defaults to stderr.

    Returns:
        The configured ``docshelf`` logger.
    """
    if config is None:
        config = get_config().logging

    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.format == "json":
        handler.setFormatter(JsonLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)

    root.addHandler(handler)
    root.setLevel(config.level)
    return root
