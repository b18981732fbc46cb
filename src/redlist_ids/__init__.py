"""redlist-ids - resolve taxon names to IUCN Red List identifiers.

Architecture::

    datasources/   Red List API client (search by name / id, detail-page probe)
    resolve.py     Names → identifiers (direct case-insensitive match, else all)
    coerce.py      Ids, lists, tables → identifiers, with optional checking
    schemas.py     TaxonRecord, ResolvedTaxon, IucnIds, IucnTable
    reporting.py   Progress checkpoints (logging or silent)
    flows/         Prefect batch flow (names file → JSON table)
    services/      Shared HTTP session with retry

Data flow: names → datasources (search) → resolve → IucnIds ⇄ IucnTable
"""

__version__ = "0.1.0"

from redlist_ids.coerce import as_iucn, make_iucn
from redlist_ids.config import Settings, get_settings
from redlist_ids.resolve import get_iucn
from redlist_ids.schemas import IucnIds, IucnRow, IucnTable, MatchReason, ResolvedTaxon, TaxonRecord

__all__ = [
    "IucnIds",
    "IucnRow",
    "IucnTable",
    "MatchReason",
    "ResolvedTaxon",
    "Settings",
    "TaxonRecord",
    "__version__",
    "as_iucn",
    "get_iucn",
    "get_settings",
    "make_iucn",
]
