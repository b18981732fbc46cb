"""
Resolve taxon names to IUCN Red List identifiers.

Each name is searched on the Red List API, one request per name, in order.
The Red List has no fuzzy search, so a name either matches or it doesn't:
there is no "multiple matches" state and no interactive disambiguation.

Match rule:
  1. No records → ``id=None``, ``match="not found"``.
  2. Records whose scientific name equals the input (case-insensitive) →
     those ids.
  3. Otherwise → all returned ids.

A row's ``id`` is the first selected id; all selected ids are kept in
``ResolvedTaxon.candidate_ids``.

Example::

    from redlist_ids import get_iucn

    ids = get_iucn(["Branta canadensis", "Panthera uncia"], key="...")
    ids.ids    # ['22679935', '22732']
    ids.match  # [MatchReason.FOUND, MatchReason.FOUND]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from redlist_ids.config import get_settings
from redlist_ids.datasources.redlist.client import RedListClient, parse_records
from redlist_ids.errors import MissingApiKeyError
from redlist_ids.reporting import Reporter, default_reporter
from redlist_ids.schemas import IucnIds, MatchReason, ResolvedTaxon, TaxonRecord
from redlist_ids.services.http import create_session


def _validate_names(names: object) -> list[str]:
    """Accept one name or a sequence of names; reject anything else."""
    if isinstance(names, str):
        return [names]
    if isinstance(names, Sequence) and all(isinstance(n, str) for n in names):
        return list(names)
    msg = f"names must be a str or a sequence of str, not {type(names).__name__}"
    raise TypeError(msg)


def build_client(key: str | None = None) -> RedListClient:
    """
    Build a client from an explicit key or the configured one.

    Raises:
        MissingApiKeyError: If neither ``key`` nor settings provide a token.
    """
    settings = get_settings()
    token = key or settings.api_key
    if not token:
        raise MissingApiKeyError
    return RedListClient(
        token,
        api_base=settings.api_base,
        session=create_session(timeout=settings.timeout),
    )


def select_candidates(name: str, records: Sequence[TaxonRecord]) -> list[TaxonRecord]:
    """Records matching ``name`` case-insensitively, else all records."""
    wanted = name.lower()
    direct = [r for r in records if r.scientific_name and r.scientific_name.lower() == wanted]
    return direct or list(records)


def resolve_name(
    name: str,
    client: RedListClient,
    reporter: Reporter,
    **options: Any,
) -> ResolvedTaxon:
    """Search one name and classify the result."""
    reporter.lookup_started(name)
    records = parse_records(client.search(name, **options))
    if not records:
        reporter.not_found(name)
        return ResolvedTaxon(id=None, name=name, match=MatchReason.NOT_FOUND)

    selected = select_candidates(name, records)
    candidate_ids = tuple(r.taxonid for r in selected)
    return ResolvedTaxon(
        id=candidate_ids[0],
        name=name,
        match=MatchReason.FOUND,
        candidate_ids=candidate_ids,
        records=tuple(records),
    )


def get_iucn(
    names: str | Sequence[str],
    *,
    key: str | None = None,
    verbose: bool = True,
    reporter: Reporter | None = None,
    client: RedListClient | None = None,
    **options: Any,
) -> IucnIds:
    """
    Resolve names to Red List taxon identifiers.

    Args:
        names: A common or scientific name, or a sequence of them.
        key: Red List API token. Defaults to the configured ``api_key``.
        verbose: Report progress through the default logging reporter.
        reporter: Explicit reporter; overrides ``verbose``.
        client: Pre-built client (``key`` is then ignored).
        **options: Extra query parameters passed to the search endpoint.

    Returns:
        One ``ResolvedTaxon`` per input name, in input order.

    Raises:
        TypeError: If ``names`` is not a str or a sequence of str.
        MissingApiKeyError: If no token is available.
        requests.RequestException: On transport or HTTP errors; the whole
            batch is aborted.
    """
    name_list = _validate_names(names)
    if not name_list:
        return IucnIds()
    client = client or build_client(key)
    reporter = reporter or default_reporter(verbose)

    items = tuple(resolve_name(n, client, reporter, **options) for n in name_list)
    return IucnIds(items=items)
