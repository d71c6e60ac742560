"""
Domain exceptions raised by the store and the employee client.

The application factory maps each of these to a JSON error response;
services never translate them.
"""


class DepartmentNotFoundError(ValueError):
    """No department exists with the requested id."""

    def __init__(self, department_id: int) -> None:
        super().__init__(f"Department ID {department_id} not found.")
        self.department_id = department_id


class InvalidDepartmentError(ValueError):
    """The store rejected a department (missing name, duplicate id, ...)."""


class EmployeeServiceError(RuntimeError):
    """The employee service answered with an error or an unusable body."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class EmployeeServiceUnavailableError(EmployeeServiceError):
    """No instance could be resolved or reached for the employee service."""
