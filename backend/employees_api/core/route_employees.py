"""Route Resolution - maps (method, path) to one of five employee operations.

Invariants:
    - Path pattern is exactly /employees/:id (one non-empty segment); anything else has no id
    - Precedence is fixed: id+GET, id+PUT, id+DELETE, POST, GET, default
    - An id-bearing GET never resolves to LIST
    - Every unmatched method/path combination resolves to LIST
    - OPTIONS is not resolved here (answered before routing)

Design Decisions:
    - Ordered rule table, not per-path FastAPI routes: the single catch-all
      endpoint resolves every method and path through it
    - employee_id stays a str here; coercion to int happens at the backend boundary
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

EMPLOYEE_PATH = re.compile(r"^/employees/(?P<id>[^/]+)$")
_INTEGER_ID = re.compile(r"-?[0-9]+")

# Methods whose body is parsed before dispatch, whatever operation they resolve to
BODY_METHODS = frozenset({"POST", "PUT"})

PAYLOAD_FIELD = "employees"


class Operation(str, Enum):
    """The five pass-through operations."""
    LIST = "list"
    FETCH = "fetch"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Route:
    """Resolved operation plus the raw path id (None when the path has none)."""
    operation: Operation
    employee_id: str | None = None


# (predicate(method, has_id), operation); first match wins
_RULES: tuple[tuple[Callable[[str, bool], bool], Operation], ...] = (
    (lambda method, has_id: has_id and method == "GET", Operation.FETCH),
    (lambda method, has_id: has_id and method == "PUT", Operation.UPDATE),
    (lambda method, has_id: has_id and method == "DELETE", Operation.DELETE),
    (lambda method, has_id: method == "POST", Operation.CREATE),
    (lambda method, has_id: method == "GET", Operation.LIST),
)


def match_employee_id(path: str) -> str | None:
    """Return the :id segment of /employees/:id, or None."""
    match = EMPLOYEE_PATH.match(path)
    return match.group("id") if match else None


def resolve_route(method: str, path: str) -> Route:
    """Resolve method + path to an operation using the fixed precedence."""
    method = method.upper()
    employee_id = match_employee_id(path)
    for predicate, operation in _RULES:
        if predicate(method, employee_id is not None):
            return Route(operation, employee_id)
    return Route(Operation.LIST, employee_id)


def reads_body(method: str) -> bool:
    return method.upper() in BODY_METHODS


def extract_payload(body: Any) -> Any:
    """Pull the employee payload out of a parsed request body.

    Absent field or a non-object body yields None; the backend decides
    what to do with it.
    """
    if isinstance(body, dict):
        return body.get(PAYLOAD_FIELD)
    return None


def coerce_employee_id(raw: str) -> int | str:
    """'5' -> 5 for ASCII integers; anything else passes through for the backend to reject."""
    if _INTEGER_ID.fullmatch(raw):
        return int(raw)
    return raw
