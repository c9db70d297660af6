"""Pydantic Schemas - shape of the rows exchanged with the backend.

Invariants:
    - Schemas document the row; request payloads are forwarded without validation
"""
