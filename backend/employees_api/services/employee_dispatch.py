"""Employee Dispatch - explicit routing from a resolved Operation to its handler.

Invariants:
    - Every Operation -> handler mapping is visible in one dict
    - Handlers instantiated per-request around that request's backend client
    - Payload is only forwarded to create/update; other operations ignore it
"""

import logging
from typing import Any

from employees_api.core.route_employees import Operation, Route
from employees_api.infrastructure.supabase_client import EmployeeStore
from employees_api.services.handle_employees import EmployeeHandlers

logger = logging.getLogger(__name__)


class EmployeeDispatch:
    """Routes Operation -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, store: EmployeeStore):
        handlers = EmployeeHandlers(store)
        self._handlers = {
            Operation.LIST: lambda route, payload: handlers.list_employees(),
            Operation.FETCH: lambda route, payload: handlers.get_employee(
                route.employee_id,
            ),
            Operation.CREATE: lambda route, payload: handlers.create_employee(
                payload,
            ),
            Operation.UPDATE: lambda route, payload: handlers.update_employee(
                route.employee_id, payload,
            ),
            Operation.DELETE: lambda route, payload: handlers.delete_employee(
                route.employee_id,
            ),
        }

    async def execute(self, route: Route, payload: Any = None) -> dict:
        """Run the handler for route.operation and return the response body."""
        logger.debug(
            f"Dispatching {route.operation.value}",
            extra={
                "operation": route.operation.value,
                "employee_id": route.employee_id,
            },
        )
        return await self._handlers[route.operation](route, payload)
