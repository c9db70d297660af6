"""Supabase Backend - verifies client construction and EmployeeStore query building.

Invariants:
    - Caller's Authorization header becomes a global client header
    - Construction failures surface as ClientConfigurationError with the SDK message
    - Each store method issues exactly one query on the employees table
    - APIError -> BackendError with the backend's raw message and code
"""

import pytest
from postgrest.exceptions import APIError

import employees_api.infrastructure.supabase_client as supabase_module
from employees_api.config import Settings
from employees_api.core.errors import BackendError, ClientConfigurationError
from employees_api.infrastructure.supabase_client import (
    LIST_COLUMNS, EmployeeStore, create_backend_client,
)

from tests.mock_supabase import MockSupabaseClient


# -- Helpers -------------------------------------------------------------------

def _settings():
    return Settings(
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
    )


@pytest.fixture
def captured_create(monkeypatch):
    """Replace acreate_client; record its arguments."""
    captured = {}

    async def fake_acreate_client(url, key, options=None):
        captured.update(url=url, key=key, options=options)
        return MockSupabaseClient()

    monkeypatch.setattr(supabase_module, "acreate_client", fake_acreate_client)
    return captured


# ==============================================================================
# create_backend_client
# ==============================================================================


async def test_client_built_from_settings_with_forwarded_authorization(
    captured_create,
):
    client = await create_backend_client(_settings(), "Bearer caller-jwt")

    assert isinstance(client, MockSupabaseClient)
    assert captured_create["url"] == "https://project.supabase.co"
    assert captured_create["key"] == "anon-key"
    assert captured_create["options"].headers["Authorization"] == "Bearer caller-jwt"


async def test_client_without_authorization_uses_default_headers(
    captured_create,
):
    await create_backend_client(_settings(), None)

    assert "Authorization" not in captured_create["options"].headers


async def test_construction_failure_maps_to_configuration_error(monkeypatch):
    class SupabaseException(Exception):
        def __init__(self, message):
            self.message = message
            super().__init__(message)

    async def failing_acreate_client(url, key, options=None):
        raise SupabaseException("supabase_url is required")

    monkeypatch.setattr(supabase_module, "acreate_client", failing_acreate_client)

    with pytest.raises(ClientConfigurationError) as exc_info:
        await create_backend_client(Settings(supabase_url="", supabase_anon_key=""), None)

    assert exc_info.value.message == "supabase_url is required"


async def test_real_sdk_rejects_empty_url():
    """Unconfigured environment fails at construction, before any query."""
    with pytest.raises(ClientConfigurationError):
        await create_backend_client(
            Settings(supabase_url="", supabase_anon_key=""), None,
        )


# ==============================================================================
# EmployeeStore
# ==============================================================================


async def test_list_employees_selects_list_columns():
    backend = MockSupabaseClient([[{"job_id": 1}]])

    rows = await EmployeeStore(backend).list_employees()

    assert rows == [{"job_id": 1}]
    assert backend.calls[0]["table"] == "employees"
    assert backend.calls[0]["columns"] == LIST_COLUMNS


async def test_get_employee_filters_on_coerced_id():
    backend = MockSupabaseClient()

    await EmployeeStore(backend).get_employee("42")

    assert backend.calls[0]["columns"] == "*"
    assert backend.calls[0]["filters"] == [("eq", "employee_id", 42)]


async def test_create_update_delete_issue_one_call_each():
    backend = MockSupabaseClient()
    store = EmployeeStore(backend)
    payload = {"first_name": "Ada"}

    await store.create_employee(payload)
    await store.update_employee("7", payload)
    await store.delete_employee("7")

    assert [c["action"] for c in backend.calls] == ["insert", "update", "delete"]
    assert backend.calls[0]["json"] == payload
    assert backend.calls[1]["filters"] == [("eq", "employee_id", 7)]
    assert backend.calls[2]["filters"] == [("eq", "employee_id", 7)]


async def test_api_error_maps_to_backend_error():
    backend = MockSupabaseClient([APIError({
        "message": "permission denied for table employees",
        "code": "42501", "hint": None, "details": None,
    })])

    with pytest.raises(BackendError) as exc_info:
        await EmployeeStore(backend).delete_employee("1")

    assert exc_info.value.message == "permission denied for table employees"
    assert exc_info.value.operation == "delete"
    assert exc_info.value.backend_code == "42501"


async def test_non_api_errors_propagate_unchanged():
    backend = MockSupabaseClient([ConnectionError("connection refused")])

    with pytest.raises(ConnectionError):
        await EmployeeStore(backend).list_employees()
