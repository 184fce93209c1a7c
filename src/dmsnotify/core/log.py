"""Logging setup for the Lambda runtime and local runs."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set the root log level, installing a stream handler if none exists.

    The Lambda runtime pre-installs a handler on the root logger, so only the
    level is changed there.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())
