"""Employees Function - single catch-all endpoint: preflight, client, route, dispatch.

Invariants:
    - OPTIONS on any path answered before any backend client is built
    - Order per request: build client -> resolve route -> parse body (POST/PUT) -> dispatch
    - Backend URL and anon key re-read from the environment on every request
    - Any exception after preflight is caught here once and rendered as 500 + message
    - Registered as a plain Starlette route with no method list: every method reaches it
    - Client factory looked up through get_client_factory() on each request
"""

import json
import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request

from employees_api.api.responses import (
    error_response, json_response, preflight_response,
)
from employees_api.config import Settings, get_request_settings
from employees_api.core.errors import EmployeesError, RequestBodyError, error_message
from employees_api.core.route_employees import (
    extract_payload, reads_body, resolve_route,
)
from employees_api.infrastructure.supabase_client import (
    EmployeeStore, create_backend_client,
)
from employees_api.services.employee_dispatch import EmployeeDispatch

logger = logging.getLogger(__name__)

BackendClientFactory = Callable[[Settings, str | None], Awaitable[Any]]


def get_client_factory() -> BackendClientFactory:
    """Backend client factory; tests replace this function."""
    return create_backend_client


def register_routes(app: FastAPI) -> None:
    """Mount the catch-all endpoint for every path and every HTTP method."""
    app.add_route("/{path:path}", employees_function, name="employees_function")


async def employees_function(request: Request):
    """Serve every method on every path; unmatched requests list employees."""
    if request.method == "OPTIONS":
        return preflight_response()

    try:
        client_factory = get_client_factory()
        client = await client_factory(
            get_request_settings(), request.headers.get("authorization"),
        )
        route = resolve_route(request.method, request.url.path)
        payload = (
            await _read_payload(request) if reads_body(request.method) else None
        )
        logger.info(
            f"{request.method} {request.url.path} -> {route.operation.value}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "operation": route.operation.value,
                "employee_id": route.employee_id,
            },
        )
        body = await EmployeeDispatch(EmployeeStore(client)).execute(
            route, payload,
        )
        return json_response(body)
    except Exception as e:
        extra = e.to_log_extra() if isinstance(e, EmployeesError) else {}
        logger.error(
            f"Employees request failed: {error_message(e)}",
            extra={"method": request.method, "path": request.url.path, **extra},
            exc_info=True,
        )
        return error_response(e)


async def _read_payload(request: Request) -> Any:
    """Parse the JSON body and return its `employees` field."""
    raw = await request.body()
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise RequestBodyError(str(e))
    return extract_payload(body)
