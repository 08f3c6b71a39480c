"""
Logging configuration for the netint CLI
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOG_LEVEL_ENV = "NETINT_LOG_LEVEL"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: Optional[str] = None) -> int:
    """
    Configure root logging for command-line use.

    Level comes from `level`, else NETINT_LOG_LEVEL, else WARNING.
    Records go to stderr through rich so they don't mix with the
    tables on stdout. The library itself never calls this.

    Returns:
        The effective logging level
    """
    level_str = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    log_level = LOG_LEVELS.get(level_str, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s", logging.getLevelName(log_level)
    )
    return log_level
