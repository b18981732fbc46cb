"""External data source integrations.

Each subdirectory is one data source::

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    └── client.py         # API URLs, constants, request helpers

Fetch functions return raw dicts; parsing into ``redlist_ids.schemas`` models
happens in the client module so callers never see the wire format.
"""
