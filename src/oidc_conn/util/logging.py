"""Logging helpers for oidc-conn.

Modules obtain their logger through ``get_logger(__name__)``; every such
logger lives under the ``oidc_conn`` namespace.  The embedding process calls
``setup_logging()`` once to send records to stdout at ``settings.LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import sys

from oidc_conn.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str | None) -> int | str:
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        return level.upper()
    return level


def setup_logging(level: int | str | None = None) -> None:
    """Route all records to stdout using the oidc-conn format.

    ``level`` accepts an integer constant or a level name in any case and
    falls back to ``settings.LOG_LEVEL``.  Existing root handlers are
    replaced.
    """
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
