"""Request flows.

- context.py - RequestContext: settings, HTTP session, cache entries
- page.py    - fetch weather and liturgical day through the caches, render the page
"""
