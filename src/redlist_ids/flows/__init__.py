"""
Prefect flows.

Flows:
- resolve: Resolve a file of taxon names and write the identifier table

Usage (local):
    python -m redlist_ids.flows.resolve names.txt ids.json

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'resolve-names/default'
"""
