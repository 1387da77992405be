"""Audit logging package."""

from pattern_demos.audit.logger import LOG_PREFIX, TransactionLogger, configure_logging
from pattern_demos.audit.observer import TransactionObserver

__all__ = ["LOG_PREFIX", "TransactionLogger", "TransactionObserver", "configure_logging"]
