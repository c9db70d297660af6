"""Supabase Backend - per-request client construction and the employees table wrapper.

Invariants:
    - One client per request, scoped to the caller's Authorization header
      (row-level-security policies evaluate under the caller's identity)
    - No Authorization header on the request: client falls back to the anon key
    - Every EmployeeStore method performs exactly one backend call, no retries
    - postgrest APIError mapped to BackendError carrying the backend's raw message
    - Construction failures (bad URL/key) mapped to ClientConfigurationError

Design Decisions:
    - Wrapper over the raw query builder: handlers never touch SDK types
    - Path ids coerced to int when they are ASCII integers; the eq filter is still
      sent as text (eq.5), so the only wire difference is leading zeros dropped
"""

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import AsyncClient, AsyncClientOptions, acreate_client

from employees_api.config import Settings
from employees_api.core.errors import (
    BackendError, ClientConfigurationError, error_message,
)
from employees_api.core.route_employees import coerce_employee_id

logger = logging.getLogger(__name__)

TABLE = "employees"
ID_COLUMN = "employee_id"
# Joined through the job_id foreign key to the jobs table
LIST_COLUMNS = "job_id, first_name, last_name, jobs: job_id (job_title)"


async def create_backend_client(
    settings: Settings, authorization: str | None,
) -> AsyncClient:
    """Build a Supabase client that forwards the caller's Authorization header."""
    options = (
        AsyncClientOptions(headers={"Authorization": authorization})
        if authorization
        else AsyncClientOptions()
    )
    try:
        return await acreate_client(
            settings.supabase_url, settings.supabase_anon_key, options=options,
        )
    except Exception as e:
        raise ClientConfigurationError(error_message(e))


class EmployeeStore:
    """Single-call CRUD over the employees table."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def list_employees(self) -> list[dict]:
        return await self._execute(
            "list", self._table().select(LIST_COLUMNS),
        )

    async def get_employee(self, employee_id: str) -> list[dict]:
        """All columns of the matching row, still as a list."""
        return await self._execute(
            "fetch",
            self._table().select("*").eq(
                ID_COLUMN, coerce_employee_id(employee_id),
            ),
        )

    async def create_employee(self, payload: Any) -> list[dict]:
        return await self._execute("create", self._table().insert(payload))

    async def update_employee(
        self, employee_id: str, payload: Any,
    ) -> list[dict]:
        return await self._execute(
            "update",
            self._table().update(payload).eq(
                ID_COLUMN, coerce_employee_id(employee_id),
            ),
        )

    async def delete_employee(self, employee_id: str) -> list[dict]:
        return await self._execute(
            "delete",
            self._table().delete().eq(
                ID_COLUMN, coerce_employee_id(employee_id),
            ),
        )

    def _table(self):
        return self.client.table(TABLE)

    async def _execute(self, operation: str, query) -> list[dict]:
        """Run the built query, mapping backend failures to BackendError."""
        try:
            response = await query.execute()
        except APIError as e:
            raise BackendError(
                e.message or str(e), operation, backend_code=e.code,
            )
        data = response.data
        logger.info(
            "Supabase call succeeded",
            extra={
                "operation": operation,
                "rows": len(data) if isinstance(data, list) else None,
            },
        )
        return data
