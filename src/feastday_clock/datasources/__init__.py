"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, auth, errors
    └── {feature}.py      # Fetch + parse functions (one per endpoint/concept)

Fetch functions are synchronous and take the ``requests.Session`` to use;
``flows/page.py`` runs them off the event loop with ``asyncio.to_thread``.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``weather/`` for a minimal example, ``liturgical/`` for an
   authenticated multi-step one.

2. Split the raw call from the parsing so both can be tested alone::

       def fetch_something(session, lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

       def parse_something(payload: dict[str, Any]) -> Something: ...

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the page (see ``flows/page.py``):
   - Add a ``CacheEntry`` for it on ``RequestContext``
   - Fetch through ``get_or_fetch`` and add its fragment to ``PageContext``

5. Add tests in ``tests/test_{name}.py``.
"""
