"""Root conftest - shared fixtures: mock Supabase backend + FastAPI test client.

Invariants:
    - Tests never reach a real Supabase project (client factory overridden)
    - Every test gets a fresh MockSupabaseClient
    - Client factory patched per test via monkeypatch (restored automatically)
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests don't accidentally use a real project
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")

from employees_api.main import app  # noqa: E402

from tests.mock_supabase import MockSupabaseClient  # noqa: E402


@pytest.fixture
def backend():
    """Recording Supabase stand-in; script results via backend.results."""
    return MockSupabaseClient()


@pytest.fixture
async def client(backend, monkeypatch):
    """FastAPI test client whose backend client factory returns `backend`."""
    async def fake_factory(settings, authorization):
        backend.connections.append(
            {"settings": settings, "authorization": authorization},
        )
        if backend.connect_error is not None:
            raise backend.connect_error
        return backend

    monkeypatch.setattr(
        "employees_api.api.routes.employees.get_client_factory",
        lambda: fake_factory,
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
