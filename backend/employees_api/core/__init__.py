"""Core Layer - pure request logic, no IO, no async, no SDK imports.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic
"""
