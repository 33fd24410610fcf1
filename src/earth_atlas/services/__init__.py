"""
Shared utilities used by every data source.

- http.py        - requests.Session with default timeout, no retries
- concurrency.py - parallel batches, stale-result guard, debouncer
"""
