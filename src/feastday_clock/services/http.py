"""
Shared HTTP client for upstream API calls.

Provides a pre-configured ``requests.Session`` with a User-Agent header and a
default timeout. Upstream calls are one-shot: the mounted adapter never
retries, a failed request surfaces immediately and the page falls back to its
degraded rendering instead.

Usage::

    from feastday_clock.services.http import create_session

    session = create_session(timeout=15)
    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from feastday_clock import __version__

#: No retries, no redirect loops, statuses left to ``resp.raise_for_status()``.
NO_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    redirect=3,
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 15  # seconds

USER_AGENT = f"feastday-clock/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter and timeout mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
