"""Employees Function - FastAPI application entry point.

Invariants:
    - One catch-all endpoint: every method and path reaches it
    - Interactive docs/OpenAPI routes disabled (they would shadow the catch-all)
    - Logging configured once on startup via lifespan context manager
    - CORS headers set on each response by api/responses.py, not by middleware

Run:
    uvicorn employees_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from employees_api.api.routes.employees import register_routes
from employees_api.config import get_settings
from employees_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Employees function started")
    yield
    logger.info("Employees function shutting down")


app = FastAPI(
    title="Employees Function",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

register_routes(app)
