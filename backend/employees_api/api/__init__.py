"""API Layer - the single HTTP entry point and its response builders.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response carries the CORS headers
"""
