"""Logging setup for the procurement API.

One stream handler on the root logger; every module gets its logger through
``logging.getLogger(__name__)``. The level comes from ``LOG_LEVEL``.
"""

import logging

from backend.app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging() -> None:
    """Configure application-wide logging once per process."""

    global _configured
    if _configured:
        return

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _configured = True
