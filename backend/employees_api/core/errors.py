"""Error Hierarchy - typed exceptions for every failure the function can report.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory)
    - message is the raw, caller-visible text: the 500 body is exactly exc.message
    - All errors map to HTTP 500; there is no per-category status

Design Decisions:
    - Single hierarchy with EmployeesError base: the route boundary catches all
    - Category kept for logging only, never rendered in the response
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for log routing."""
    CONFIGURATION = "configuration"
    REQUEST = "request"
    EXTERNAL_API = "external_api"


class EmployeesError(Exception):
    """Base exception for all Employees Function errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.operation = operation

    def to_log_extra(self) -> dict:
        """Structured fields for logger.error(..., extra=...)."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "operation": self.operation,
        }


class ClientConfigurationError(EmployeesError):
    """Backend client could not be constructed (bad URL or key)."""
    def __init__(self, message: str):
        super().__init__(
            message, "CLIENT_CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            "connect",
        )


class RequestBodyError(EmployeesError):
    """POST/PUT body is not valid JSON."""
    def __init__(self, message: str):
        super().__init__(
            message, "INVALID_REQUEST_BODY", ErrorCategory.REQUEST, "parse",
        )


class BackendError(EmployeesError):
    """Backend (PostgREST) call failed. message is the backend's own message."""
    def __init__(
        self, message: str, operation: str, backend_code: str | None = None,
    ):
        super().__init__(
            message, "BACKEND_ERROR", ErrorCategory.EXTERNAL_API, operation,
        )
        self.backend_code = backend_code

    def to_log_extra(self) -> dict:
        extra = super().to_log_extra()
        extra["backend_code"] = self.backend_code
        return extra


def error_message(exc: BaseException) -> str:
    """Caller-visible text for any exception reaching the route boundary."""
    if isinstance(exc, EmployeesError):
        return exc.message
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)
