from __future__ import annotations

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """
    Configures loguru for the rabbitctl library.

    This function enables "rabbitctl" logs and sets up a standard format
    that includes the bound `tool` and `verb`.
    """
    logger.remove()
    logger.configure(extra={"tool": "-", "verb": "-"})

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[tool]}</cyan>:<cyan>{extra[verb]}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(sys.stderr, format=fmt, level=level)
    logger.enable("rabbitctl")
