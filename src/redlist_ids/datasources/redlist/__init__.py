"""IUCN Red List data source.

Searches the Red List API v3 by name or taxon id and probes taxon detail
pages. Requires an API token (see ``redlist_ids.config``).

Public API:
  - client: RedListClient, parse_records, API_BASE, details_url
"""

from redlist_ids.datasources.redlist.client import (
    API_BASE,
    DETAILS_URL_TEMPLATE,
    RedListClient,
    details_url,
    parse_records,
)

__all__ = [
    "API_BASE",
    "DETAILS_URL_TEMPLATE",
    "RedListClient",
    "details_url",
    "parse_records",
]
