"""Logging helpers for ntreelib.

ntreelib logs through loguru but disables its own messages on import, so an
application sees nothing unless it opts in.
"""

import sys
from typing import Any, Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def enable_logging(level: str = "DEBUG", sink: Any = sys.stderr, fmt: str = DEFAULT_FORMAT) -> int:
    """Turn on ntreelib log messages and route them to ``sink``.

    Args:
        level: Minimum level the sink receives
        sink: Any loguru sink (stream, path, callable)
        fmt: loguru format string

    Returns:
        Handler id, to pass to ``disable_logging``
    """
    logger.enable("ntreelib")
    handler_id = logger.add(
        sink,
        level=level,
        format=fmt,
        filter=lambda record: record["name"].startswith("ntreelib"),
    )
    logger.debug("ntreelib logging enabled")
    return handler_id


def disable_logging(handler_id: Optional[int] = None) -> None:
    """Silence ntreelib again, removing the sink added by ``enable_logging``."""
    if handler_id is not None:
        logger.remove(handler_id)
    logger.disable("ntreelib")
