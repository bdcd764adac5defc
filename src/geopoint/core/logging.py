"""
Logging setup for applications that embed geopoint.

The codecs only emit DEBUG records (rejected payloads, coordinates truncated by
the binary record) through module loggers under `geopoint.*`; nothing is
configured on import. A host process that wants those records calls
`configure_logging()`, which applies `src/geopoint/config/logging.yaml` at the
level from settings (`app.log_level` / `GEOPOINT_LOG_LEVEL`).
"""

from __future__ import annotations

import copy
import logging.config

from geopoint.config.settings import get_logging_config, get_settings


def configure_logging() -> None:
    """Apply the packaged dictConfig with the configured geopoint log level."""
    level = get_settings().app.log_level
    # Cached mapping; never mutate it in place.
    config = copy.deepcopy(get_logging_config())

    config.setdefault("root", {})["level"] = level
    config.setdefault("loggers", {}).setdefault("geopoint", {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
