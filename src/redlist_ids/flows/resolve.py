"""
Prefect flow for resolving a batch of taxon names.

Reads names (one per line, blank lines and ``#`` comments skipped), resolves
them against the Red List sequentially, and writes the identifier table as
JSON::

    {"meta": {...}, "data": {"ids": [...], "class": [...], ...}}

Run locally:
    python -m redlist_ids.flows.resolve names.txt ids.json
"""

from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from prefect import flow, task
from pydantic import SecretStr

from redlist_ids.resolve import get_iucn
from redlist_ids.schemas import IucnIds, IucnTable


def read_names(path: Path) -> list[str]:
    """Read one name per line, skipping blanks and ``#`` comments."""
    names = []
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            names.append(stripped)
    return names


def load_table(path: Path) -> IucnTable:
    """Read a table written by ``save_table``."""
    envelope: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    return IucnTable.from_columns(envelope.get("data", envelope))


# No task retries: a failed lookup aborts the batch.
@task(name="resolve-names")
def resolve_names(names: list[str], key: SecretStr | None = None) -> IucnIds:
    """Resolve all names in one sequential pass."""
    return get_iucn(names, key=key.get_secret_value() if key else None)


@task(name="save-table")
def save_table(ids: IucnIds, output: Path) -> Path:
    """Write the identifier table with a small metadata envelope."""
    output.parent.mkdir(parents=True, exist_ok=True)
    envelope = {
        "meta": {
            "source": "iucnredlist.org",
            "resolved_at": datetime.now(UTC).isoformat(),
            "count": len(ids),
        },
        "data": ids.to_table().to_columns(),
    }
    with output.open("w", encoding="utf-8") as f:
        json.dump(envelope, f, indent=2)
    return output


@flow(name="resolve-names", log_prints=True)
def resolve_all(
    names_file: Path, output: Path, key: SecretStr | None = None
) -> dict[str, Any]:
    """
    Resolve every name in ``names_file`` and write the table to ``output``.

    ``key`` is a ``SecretStr`` so the stored flow-run parameters show it
    masked. Without it the configured ``api_key`` is used.
    """
    names = read_names(Path(names_file))
    print(f"Resolving {len(names)} names from {names_file}...")

    ids = resolve_names(names, key=key)
    output_path = save_table(ids, Path(output))

    found = sum(1 for i in ids.ids if i is not None)
    print(f"Saved {len(ids)} rows ({found} found) to {output_path}")
    return {"names": len(names), "found": found, "output": str(output_path)}


if __name__ == "__main__":
    result = resolve_all(Path(sys.argv[1]), Path(sys.argv[2]))
    print(f"Flow complete: {result}")
