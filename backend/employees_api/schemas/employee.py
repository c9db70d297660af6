"""Employee Schema - the employees row as stored by the backend.

Invariants:
    - Mirrors the external table; constraints (uniqueness, FKs, non-null) live in the backend
    - manager_id is the only nullable field
    - Never used to validate requests: payloads pass through verbatim
    - Employee, JobTitle and EmployeeSummary document the row shapes returned by
      fetch and list; no production code instantiates them (tests do)
"""

from pydantic import BaseModel, ConfigDict


class Employee(BaseModel):
    """One row of the employees table."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "employee_id": 100,
                "first_name": "Steven",
                "last_name": "King",
                "email": "steven.king@example.com",
                "phone_number": "515.123.4567",
                "hire_date": "1987-06-17",
                "job_id": 4,
                "salary": 24000,
                "manager_id": None,
                "department_id": 9,
            }
        }
    )

    employee_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    hire_date: str
    job_id: int
    salary: float
    manager_id: int | None = None
    department_id: int


class JobTitle(BaseModel):
    """Embedded jobs row returned by the list select (documents the shape only)."""
    job_title: str


class EmployeeSummary(BaseModel):
    """List row: job_id, names, joined job title (documents the shape only)."""
    job_id: int
    first_name: str
    last_name: str
    jobs: JobTitle | None = None
