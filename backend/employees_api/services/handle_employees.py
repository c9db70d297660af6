"""Employee Handlers - list, fetch, create, update, delete.

Invariants:
    - Each handler makes exactly one EmployeeStore call and returns the response body
    - Backend errors propagate untouched (the route boundary renders them)
    - fetch returns {"employee": [rows]}: a list, even for one row or none
    - create/update echo the caller's payload, not the persisted row
    - delete returns {}
"""

from typing import Any

from employees_api.infrastructure.supabase_client import EmployeeStore


class EmployeeHandlers:
    """Pass-through handlers for the employees table."""

    def __init__(self, store: EmployeeStore):
        self.store = store

    async def list_employees(self) -> dict:
        employees = await self.store.list_employees()
        return {"employees": employees}

    async def get_employee(self, employee_id: str) -> dict:
        employee = await self.store.get_employee(employee_id)
        return {"employee": employee}

    async def create_employee(self, employee: Any) -> dict:
        await self.store.create_employee(employee)
        return {"employee": employee}

    async def update_employee(self, employee_id: str, employee: Any) -> dict:
        await self.store.update_employee(employee_id, employee)
        return {"employee": employee}

    async def delete_employee(self, employee_id: str) -> dict:
        await self.store.delete_employee(employee_id)
        return {}
