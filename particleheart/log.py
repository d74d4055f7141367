"""Logging setup for the runnable entry points.

Modules obtain a logger via `logging.getLogger(__name__)`; only the scripts
configure handlers.
"""

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Configure the root logger once. No-op if it already has handlers."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
