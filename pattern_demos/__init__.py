"""
Pattern Demos - Source Package

Two small console programs built around classic object-oriented patterns:

1. Bank account: Observer (transaction notifications) and
   Decorator (secured account with a per-withdrawal ceiling)
2. Library lending: Strategy (sort order), Factory (book creation)
   and Iterator (available-books snapshots)

Both keep all state in memory; the library can save and load its
catalog as a flat text file.
"""

# Applies the structlog configuration before any module logs
import pattern_demos.audit  # noqa: F401

__version__ = "1.0.0"
__author__ = "Pattern Demos Team"
