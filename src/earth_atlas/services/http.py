"""
Shared HTTP session for every source client.

Requests go out once: the mounted adapter never retries, so a 503 from
iNaturalist or a dropped connection to GBIF reaches the caller on the first
attempt and is reported as a ``SourceError`` by the client base class.
Each adapter also carries a default timeout, applied whenever a caller does
not pass ``timeout=`` itself.

Usage::

    from earth_atlas.services.http import create_session

    s = create_session(timeout=10, user_agent="my-tool/1.0")
    resp = s.get("https://api.gbif.org/v1/occurrence/count")
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Zero retries; GET/HEAD/OPTIONS only, status codes left to raise_for_status().
DEFAULT_RETRY = Retry(
    total=0,
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = "earth-atlas/0.1 (wildlife observation explorer)"


class TimeoutHTTPAdapter(HTTPAdapter):
    """``HTTPAdapter`` that fills in a timeout when the request has none."""

    def __init__(self, *args: Any, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> requests.Session:
    """
    Build a session with ``TimeoutHTTPAdapter`` mounted for http and https.

    Args:
        retry: Retry strategy for the adapter (defaults to ``DEFAULT_RETRY``).
        timeout: Seconds to wait when a call passes no timeout.
        user_agent: ``User-Agent`` header sent with every request.
    """
    adapter = TimeoutHTTPAdapter(max_retries=retry or DEFAULT_RETRY, timeout=timeout)
    s = requests.Session()
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return s


#: Fallback session for clients constructed without one.
session: requests.Session = create_session()
