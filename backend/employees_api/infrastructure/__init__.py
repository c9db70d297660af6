"""Infrastructure Layer - backend client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Backend SDK exceptions mapped to core/errors.py types at this boundary
"""
