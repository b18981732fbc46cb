"""
IUCN Red List API client.

Low-level HTTP client for the Red List API v3. Every API call needs a token,
sent as the ``token`` query parameter.

API docs: https://apiv3.iucnredlist.org/api/v3/docs
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests

from redlist_ids.schemas import DETAILS_URL_TEMPLATE, TaxonRecord, details_url
from redlist_ids.services.http import session as default_session

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://apiv3.iucnredlist.org/api/v3"

__all__ = [
    "API_BASE",
    "DETAILS_URL_TEMPLATE",
    "RedListClient",
    "details_url",
    "parse_records",
]


def parse_records(payload: Any) -> list[TaxonRecord]:
    """
    Extract the projected records from a search response.

    A response without a ``result`` list (error bodies, ``null`` results) is
    treated as having no records. Entries without a ``taxonid`` are skipped.
    """
    if not isinstance(payload, dict):
        return []
    results = payload.get("result")
    if not isinstance(results, list):
        return []
    return [
        TaxonRecord.from_api(r)
        for r in results
        if isinstance(r, dict) and r.get("taxonid") is not None
    ]


class RedListClient:
    """Token-bound client for the species search endpoints."""

    def __init__(
        self,
        key: str,
        *,
        api_base: str = API_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self.key = key
        self.api_base = api_base.rstrip("/")
        self.session = session or default_session

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Make an authenticated GET request to the Red List API."""
        url = f"{self.api_base}/{endpoint}"
        resp = self.session.get(url, params={**(params or {}), "token": self.key})
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()
        return data

    # -----------------------------------------------------------------------
    # Public helpers
    # -----------------------------------------------------------------------

    def search(self, name: str, **options: Any) -> dict[str, Any]:
        """GET /species/{name}: records whose name matches ``name``."""
        return self._get(f"species/{quote(name, safe='')}", options)

    def search_by_id(self, taxon_id: str | int, **options: Any) -> dict[str, Any]:
        """GET /species/id/{id}: the record for one taxon id."""
        return self._get(f"species/id/{quote(str(taxon_id), safe='')}", options)

    def taxon_exists(self, taxon_id: str) -> bool:
        """Probe the taxon's detail page; HTTP 200 means it exists."""
        resp = self.session.get(details_url(taxon_id))
        return resp.status_code == 200
