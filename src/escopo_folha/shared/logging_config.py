"""Logging setup for the command line interface.

Library modules only call ``logger.debug``; sinks are installed here, once,
by the CLI entry point.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(verbose: bool = False) -> None:
    """Replace loguru's default handler with a stderr sink.

    Args:
        verbose: Emit DEBUG messages (calculation bases and results) when True
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=LOG_FORMAT,
        colorize=True,
    )
