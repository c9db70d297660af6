"""Employees Function - HTTP CRUD over the Supabase `employees` table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
