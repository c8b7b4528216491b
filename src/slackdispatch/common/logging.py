"""Logging setup for slackdispatch."""

from __future__ import annotations

import logging

from slackdispatch.common.config import SlackDispatchConfig

PACKAGE_LOGGER = "slackdispatch"


def configure_logging(config: SlackDispatchConfig | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    config = config or SlackDispatchConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, config.log_level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "PACKAGE_LOGGER"]
