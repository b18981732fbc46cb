"""Exceptions raised by redlist-ids."""

from __future__ import annotations


class RedListError(Exception):
    """Base error for this package."""


class MissingApiKeyError(RedListError):
    """No Red List API token was passed or configured."""

    def __init__(self) -> None:
        super().__init__(
            "A Red List API key is required: pass key=... or set IUCN_REDLIST_KEY"
        )
