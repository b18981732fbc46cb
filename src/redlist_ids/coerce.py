"""
Coerce ids, lists, and tables into ``IucnIds``.

Unlike ``get_iucn``, values here are treated as Red List taxon ids, never
as names to search for. Numbers are converted to their integer string, so
``as_iucn(22732)`` and ``as_iucn("22732")`` behave the same.

With ``check=True`` each id is verified by requesting its detail page and
its scientific name is looked up by id. With ``check=False`` no request is
made and the id is trusted, marked ``MatchReason.UNCHECKED``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from redlist_ids.datasources.redlist.client import RedListClient, parse_records
from redlist_ids.reporting import Reporter, default_reporter
from redlist_ids.resolve import build_client
from redlist_ids.schemas import IucnIds, IucnTable, MatchReason, ResolvedTaxon, id_string

IdValue = str | int | float


def make_iucn(
    value: IdValue,
    *,
    check: bool = True,
    client: RedListClient | None = None,
    key: str | None = None,
    reporter: Reporter | None = None,
) -> IucnIds:
    """
    Build a one-item ``IucnIds`` from a single id.

    Args:
        value: Red List taxon id.
        check: Verify the id against the Red List website and look up its
            scientific name. When False, no network access happens.
        client: Pre-built client; built from ``key`` / settings if needed.
        key: Red List API token, used only when ``check`` is True.
        reporter: Receives ``check_failed`` when verification fails.
    """
    taxon_id = id_string(value)
    if not check:
        item = ResolvedTaxon(
            id=taxon_id, match=MatchReason.UNCHECKED, candidate_ids=(taxon_id,)
        )
        return IucnIds(items=(item,))

    client = client or build_client(key)
    reporter = reporter or default_reporter()

    if not client.taxon_exists(taxon_id):
        reporter.check_failed(taxon_id)
        return IucnIds(items=(ResolvedTaxon(id=None, match=MatchReason.NOT_FOUND),))

    records = parse_records(client.search_by_id(taxon_id))
    item = ResolvedTaxon(
        id=taxon_id,
        name=records[0].scientific_name if records else None,
        match=MatchReason.FOUND,
        candidate_ids=(taxon_id,),
        records=tuple(records),
    )
    return IucnIds(items=(item,))


def as_iucn(
    value: Any,
    *,
    check: bool = True,
    key: str | None = None,
    client: RedListClient | None = None,
    reporter: Reporter | None = None,
) -> IucnIds:
    """
    Coerce ``value`` to ``IucnIds``.

    Accepted inputs:
      - ``IucnIds``: returned as-is.
      - ``IucnTable`` or a column mapping (``ids``, ``match``, ``name``,
        ``uri``): rebuilt without network access.
      - ``str``, ``int`` or ``float``: a single id.
      - list or tuple of the above scalars: one item per entry, in order.

    Raises:
        TypeError: For any other input type.
    """
    if isinstance(value, IucnIds):
        return value
    if isinstance(value, IucnTable):
        return value.to_ids()
    if isinstance(value, Mapping):
        return IucnTable.from_columns(value).to_ids()
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return make_iucn(value, check=check, client=client, key=key, reporter=reporter)
    if isinstance(value, (list, tuple)):
        ids = [id_string(v) for v in value]
        if check and client is None and ids:
            # One client for the whole list.
            client = build_client(key)
        parts = [
            make_iucn(i, check=check, client=client, key=key, reporter=reporter) for i in ids
        ]
        return IucnIds.concat(parts)

    msg = f"Cannot coerce {type(value).__name__} to IucnIds"
    raise TypeError(msg)
