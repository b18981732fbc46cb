"""
Progress reporting for lookups.

The resolver and coercion layer take a ``Reporter`` instead of reading a
global verbosity flag. ``LoggingReporter`` is the default; pass
``NullReporter()`` (or ``verbose=False``) for silence.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger("redlist_ids")


class Reporter(Protocol):
    """Checkpoints reported while resolving identifiers."""

    def lookup_started(self, name: str) -> None: ...

    def not_found(self, name: str) -> None: ...

    def check_failed(self, taxon_id: str) -> None: ...


class LoggingReporter:
    """Report checkpoints to a ``logging.Logger`` at INFO level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def lookup_started(self, name: str) -> None:
        self.log.info("Retrieving data for taxon '%s'", name)

    def not_found(self, name: str) -> None:
        self.log.info("Not found. Consider checking the spelling of '%s'", name)

    def check_failed(self, taxon_id: str) -> None:
        self.log.info("Red List id '%s' did not resolve to a detail page", taxon_id)


class NullReporter:
    """Discard all checkpoints."""

    def lookup_started(self, name: str) -> None:
        pass

    def not_found(self, name: str) -> None:
        pass

    def check_failed(self, taxon_id: str) -> None:
        pass


def default_reporter(verbose: bool = True) -> Reporter:
    """Pick the reporter implied by a ``verbose`` flag."""
    return LoggingReporter() if verbose else NullReporter()
