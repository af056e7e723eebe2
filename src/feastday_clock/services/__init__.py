"""
Shared service utilities.

- http.py      - requests session factory (User-Agent, default timeout, no retries)
"""
