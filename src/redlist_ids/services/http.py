"""
HTTP transport for Red List calls.

Two kinds of request go out: authenticated JSON calls to the API v3
(``apiv3.iucnredlist.org``) and plain page fetches of taxon detail pages
(``www.iucnredlist.org``), used as an existence check. Both share one
``requests.Session`` per client so rate-limit responses (429) and gateway
errors from either host get the same short backoff, and every request gets
a timeout even though ``RedListClient`` never passes one.

Retries stop at the transport: once they run out, the response or
exception reaches ``RedListClient`` unchanged and the batch aborts.

Usage::

    from redlist_ids.services.http import create_session

    client = RedListClient(key, session=create_session(timeout=10))
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from redlist_ids import __version__

#: Idempotent reads only: the Red List API has no write endpoints we call.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # RedListClient calls raise_for_status itself
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"redlist-ids/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Session for API and detail-page requests.

    Args:
        retry: Backoff policy for both hosts (defaults to ``DEFAULT_RETRY``).
        timeout: Seconds applied to any request sent without its own.
    """
    redlist_session = requests.Session()
    retrying = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    # Detail pages are still linked over plain http.
    for scheme in ("https://", "http://"):
        redlist_session.mount(scheme, retrying)
    redlist_session.headers["User-Agent"] = USER_AGENT

    send = redlist_session.send

    def send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    redlist_session.send = send_with_timeout  # type: ignore[method-assign]
    return redlist_session


#: Shared by clients built without an explicit session.
session: requests.Session = create_session()
