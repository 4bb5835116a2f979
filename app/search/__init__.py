"""
Unified catalog search package.

A single query is scored against the package, plugin and category catalogs
and the three ranked lists are merged into one response (see `services.py`
for the orchestration and `routes.py` for the HTTP endpoint).

Scoring is tiered: exact (100) > prefix (80) > substring (60) > fuzzy
edit-distance similarity (0-50). An entity keeps the best score of its
searchable fields.
"""
