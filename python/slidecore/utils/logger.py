"""Logging helpers shared by the engine, storage and CLI."""

from __future__ import annotations

import logging


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Install a single stream handler on the root logger.

    The CLI calls this once at startup; library users are free to set up
    logging themselves instead.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "slidecore")
