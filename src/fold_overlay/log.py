"""Logging setup for command-line use.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "WARNING") -> None:
    """Configure root logging once.

    No-op if the root logger already has handlers.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.WARNING)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
