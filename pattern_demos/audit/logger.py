"""
Transaction Logger

Every account event reaches the TransactionLogger, which:
- Echoes it to the console
- Appends it to the transaction log file
- Never raises (a failed write is reported and the account operation stands)

This module also owns the structlog configuration used across the package.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import structlog
from rich.console import Console

from pattern_demos.audit.observer import TransactionObserver
from pattern_demos.config import get_settings


LOG_PREFIX = "Transaction Log: "


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: Optional[str] = None) -> None:
    """
    Route structured diagnostics to stderr at the given level.

    Args:
        level: Standard level name. Defaults to the configured log level.
    """
    level = level or get_settings().app.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


class TransactionLogger(TransactionObserver):
    """
    Console and file observer for account events.

    The log file is opened in append mode for each notification and
    closed before receive() returns; nothing is buffered across calls.
    """

    def __init__(
        self,
        log_path: Optional[Union[str, Path]] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize transaction logger.

        Args:
            log_path: File to append to. Defaults to the configured path.
            console: Console to echo to. Defaults to stdout.
        """
        self._log_path = Path(log_path) if log_path is not None else get_settings().bank.transaction_log_path
        self._console = console or Console()
        self._logger = structlog.get_logger(__name__)

    @property
    def log_path(self) -> Path:
        return self._log_path

    def receive(self, message: str) -> None:
        line = f"{LOG_PREFIX}{message}"
        self._console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)

        try:
            with open(self._log_path, "a", encoding="utf-8") as log_file:
                log_file.write(line + "\n")
        except OSError as e:
            # Report but don't raise
            self._console.print(
                f"Error writing to log file: {e}",
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )
            self._logger.error(
                "transaction_log_write_failed",
                error=str(e),
                path=str(self._log_path),
            )
