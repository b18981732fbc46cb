"""
Domain models for Red List identifiers.

Pydantic models for Red List search records and the resolved identifier
vector. Datasources normalize API responses to ``TaxonRecord``; the resolver
and coercion layer both emit ``IucnIds``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

#: Detail page for a taxon on the Red List website.
DETAILS_URL_TEMPLATE = "http://www.iucnredlist.org/details/{id}/0"

#: Type marker carried by every identifier vector and table row.
IUCN_CLASS = "iucn"


def details_url(taxon_id: str) -> str:
    """Build the Red List detail page URI for a taxon id."""
    return DETAILS_URL_TEMPLATE.format(id=taxon_id)


def id_string(value: str | int | float) -> str:
    """String form of a taxon id; whole floats lose their ``.0``."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        msg = f"Red List ids must be str, int or float, not {type(value).__name__}"
        raise TypeError(msg)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# Match classification
# =============================================================================


class MatchReason(StrEnum):
    """Why an identifier is (or is not) present."""

    FOUND = "found"
    NOT_FOUND = "not found"
    NOT_ASKED = "NA due to ask=FALSE"
    UNCHECKED = "unchecked"


# =============================================================================
# Search records
# =============================================================================


class TaxonRecord(BaseModel):
    """A Red List search result projected to the columns we keep."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    taxonid: str
    scientific_name: str | None = None
    kingdom: str | None = None
    phylum: str | None = None
    order: str | None = None
    family: str | None = None
    genus: str | None = None
    authority: str | None = None

    @classmethod
    def from_api(cls, result: dict[str, Any]) -> TaxonRecord:
        """Parse a raw ``result`` entry; the API returns ``taxonid`` as an int."""
        return cls(**{**result, "taxonid": str(result["taxonid"])})


# =============================================================================
# Identifier vector
# =============================================================================


class ResolvedTaxon(BaseModel):
    """One input resolved to (at most) one Red List identifier."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    match: MatchReason = MatchReason.NOT_FOUND
    # Every id the match rule selected; ``id`` is the first of them.
    candidate_ids: tuple[str, ...] = ()
    records: tuple[TaxonRecord, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def uri(self) -> str | None:
        """Detail page URI, present only when ``id`` is set."""
        return details_url(self.id) if self.id is not None else None


class IucnIds(BaseModel):
    """
    Ordered Red List identifiers with aligned match metadata.

    Stored as a sequence of ``ResolvedTaxon`` so ``ids``, ``match``, ``name``
    and ``uri`` always have the same length. ``uri`` is ``None`` when no id in
    the vector is set.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[ResolvedTaxon, ...] = ()

    @property
    def class_name(self) -> str:
        return IUCN_CLASS

    @property
    def ids(self) -> list[str | None]:
        return [item.id for item in self.items]

    @property
    def match(self) -> list[MatchReason]:
        return [item.match for item in self.items]

    @property
    def name(self) -> list[str | None]:
        return [item.name for item in self.items]

    @property
    def uri(self) -> list[str | None] | None:
        if all(item.id is None for item in self.items):
            return None
        return [item.uri for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> ResolvedTaxon:
        return self.items[index]

    def __add__(self, other: IucnIds) -> IucnIds:
        return IucnIds(items=self.items + other.items)

    @classmethod
    def concat(cls, parts: Sequence[IucnIds]) -> IucnIds:
        """Concatenate vectors in order, keeping duplicates."""
        return cls(items=tuple(item for part in parts for item in part.items))

    def to_table(self) -> IucnTable:
        """Convert to the tabular form (one row per input)."""
        rows = [
            IucnRow(ids=item.id, name=item.name, match=item.match, uri=item.uri)
            for item in self.items
        ]
        return IucnTable(rows=rows)


# =============================================================================
# Tabular form
# =============================================================================

TABLE_COLUMNS = ("ids", "class", "name", "match", "uri")


class IucnRow(BaseModel):
    """One row of the tabular identifier form."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ids: str | None = None
    class_: str = Field(default=IUCN_CLASS, alias="class")
    name: str | None = None
    match: MatchReason = MatchReason.NOT_FOUND
    uri: str | None = None


class IucnTable(BaseModel):
    """Table with columns ``ids``, ``class``, ``name``, ``match``, ``uri``."""

    rows: list[IucnRow] = Field(default_factory=list)

    def to_ids(self) -> IucnIds:
        """
        Rebuild the identifier vector; no network access.

        URIs are derived from ``ids`` again, so a ``uri`` column never
        overrides the detail page template.
        """
        items = tuple(
            ResolvedTaxon(
                id=row.ids,
                name=row.name,
                match=row.match,
                candidate_ids=(row.ids,) if row.ids is not None else (),
            )
            for row in self.rows
        )
        return IucnIds(items=items)

    def to_columns(self) -> dict[str, list[Any]]:
        """Column-oriented form, keyed by ``TABLE_COLUMNS``."""
        return {
            "ids": [row.ids for row in self.rows],
            "class": [row.class_ for row in self.rows],
            "name": [row.name for row in self.rows],
            "match": [str(row.match) for row in self.rows],
            "uri": [row.uri for row in self.rows],
        }

    @classmethod
    def from_columns(cls, columns: Mapping[str, Sequence[Any]]) -> IucnTable:
        """
        Build a table from column sequences.

        ``ids`` is required; ``match``, ``name`` and ``uri`` may be missing
        (``uri`` is commonly absent when every id is null). Without a
        ``match`` column, rows with an id are ``unchecked`` and rows without
        one are ``not found``. Numeric ids go through ``id_string``.

        Raises:
            ValueError: If ``ids`` is missing or columns differ in length.
        """
        if "ids" not in columns:
            raise ValueError("Table is missing the 'ids' column")
        n = len(columns["ids"])
        for col in ("name", "match", "uri"):
            if col in columns and len(columns[col]) != n:
                msg = f"Column {col!r} has {len(columns[col])} values, expected {n}"
                raise ValueError(msg)

        rows = []
        for i, raw_id in enumerate(columns["ids"]):
            # Data frames carry missing ids as NaN.
            missing = raw_id is None or (isinstance(raw_id, float) and math.isnan(raw_id))
            taxon_id = None if missing else id_string(raw_id)
            default_match = MatchReason.NOT_FOUND if missing else MatchReason.UNCHECKED
            rows.append(
                IucnRow(
                    ids=taxon_id,
                    name=columns["name"][i] if "name" in columns else None,
                    match=columns["match"][i] if "match" in columns else default_match,
                    uri=columns["uri"][i] if "uri" in columns else None,
                )
            )
        return cls(rows=rows)
