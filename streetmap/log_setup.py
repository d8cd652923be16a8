"""Logging setup driven by ObservabilityConfig.

Components log through ``logging.getLogger(__name__)`` and attach
structured fields with ``extra=``. This module only decides how the
package logger renders those records.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "streetmap"

# Attributes every LogRecord carries; anything else came in through extra=.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including the ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Install a stream handler on the package logger.

    Calling this more than once replaces the previously installed
    handler instead of stacking a second one.

    Args:
        config: Observability settings; defaults to the global config.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_streetmap_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler._streetmap_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
