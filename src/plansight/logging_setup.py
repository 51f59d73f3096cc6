"""
Process-level logging setup.

Library modules only create `logging.getLogger(__name__)` loggers; the
CLI calls configure_logging() once at startup to attach a Rich handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", console: Console | None = None) -> None:
    """
    Route the plansight and uvicorn loggers through Rich.

    Args:
        level: Logging level name (e.g., "DEBUG", "INFO"); unknown names fall back to INFO
        console: Console to write to (default: stderr)
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in ("plansight", "uvicorn"):
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(resolved)
        logger.propagate = False
