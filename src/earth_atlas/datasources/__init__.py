"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, one method per endpoint
    ├── observations.py   # Query → request params, record → Observation
    ├── taxa.py           # Species autocomplete (optional)
    ├── stats.py          # Dashboard aggregates (optional)
    └── adapter.py        # The SourceAdapter wiring it together

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``gbif/`` for a compact example, ``ebird/`` for one with caches.

2. Subclass :class:`~earth_atlas.datasources.base.ApiClient`; it turns
   transport and HTTP failures into ``SourceError``::

       class MyClient(ApiClient):
           label = "MySource"
           base_url = "https://api.example.org/v1"

           def get_records(self, params: dict[str, Any]) -> dict[str, Any]:
               data: dict[str, Any] = self._get("records", params)
               return data

3. Normalize every record into :class:`~earth_atlas.schemas.Observation`
   and expose ``search(query, dates)`` / ``search_taxa(text)`` on an adapter.

4. Add a ``Source`` member and register the adapter in
   ``earth_atlas.query.build_adapters``.

5. Add tests in ``tests/test_{name}.py``.
"""
