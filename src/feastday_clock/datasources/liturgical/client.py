"""Liturgical calendar API: errors and OAuth2 client-credentials exchange.

The API is protected by a client-credentials grant. Every fetch starts by
exchanging the configured client id/secret for a bearer token at the token
endpoint; the token is then sent with the calendar and day requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import requests


class LiturgicalError(Exception):
    """Base class for liturgical data source failures."""


class LiturgicalConfigError(LiturgicalError):
    """Endpoint URLs or client credentials are not configured."""


class LiturgicalDayNotFound(LiturgicalError):
    """The calendar listing has no entry for the requested date."""


def bearer_headers(token: str) -> dict[str, str]:
    """Authorization header for an access token."""
    return {"Authorization": f"Bearer {token}", "Accept": "application/json"}


def fetch_access_token(
    session: requests.Session,
    token_url: str,
    client_id: str,
    client_secret: str,
) -> str:
    """
    Exchange client credentials for a bearer token.

    Args:
        session: HTTP session to issue the request with.
        token_url: OAuth2 token endpoint.
        client_id: Client identifier.
        client_secret: Client secret.

    Returns:
        The ``access_token`` string.

    Raises:
        requests.HTTPError: on a non-2xx response.
        KeyError: if the response carries no ``access_token``.
    """
    resp = session.post(
        token_url,
        data={
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
        },
    )
    resp.raise_for_status()
    token: str = resp.json()["access_token"]
    return token
