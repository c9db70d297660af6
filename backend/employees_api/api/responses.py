"""Response Builders - JSON success, plain-text failure, CORS preflight.

Invariants:
    - Every response carries Access-Control-Allow-Origin: * and the configured
      Access-Control-Allow-Headers
    - Success is always 200 JSON; failure is always 500 text/plain with the raw message
    - Preflight is 200 with an empty body
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from employees_api.config import get_settings
from employees_api.core.errors import error_message


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": get_settings().allowed_headers,
    }


def json_response(content: dict) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK, content=content, headers=cors_headers(),
    )


def preflight_response() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers=cors_headers())


def error_response(exc: BaseException) -> PlainTextResponse:
    """500 whose body is exactly the error's message."""
    return PlainTextResponse(
        error_message(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers=cors_headers(),
    )
