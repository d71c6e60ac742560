"""
Employee lookup client: the one remote call this service makes.

``EmployeeClient`` is the interface the department service depends on.
``HttpEmployeeClient`` implements it against the employee service's
REST API through the load-balanced transport::

    GET http://employee-service/employees/departments/{departmentId}
"""

import abc
import logging

from department_service.errors import EmployeeServiceError
from department_service.models.employee import Employee
from department_service.services.transport import LoadBalancedTransport

logger = logging.getLogger(__name__)


class EmployeeClient(abc.ABC):
    """Interface for looking up the employees of a department."""

    @abc.abstractmethod
    def find_by_department_id(self, department_id: int) -> list[Employee]:
        """Return the employees of a department, in the order reported."""
        raise NotImplementedError


class HttpEmployeeClient(EmployeeClient):
    """
    Employee client backed by HTTP.

    Args:
        transport: Load-balanced transport that resolves the logical host.
        base_url:  Base URL with the logical service name as host,
                   e.g. ``http://employee-service``.
    """

    def __init__(self, transport: LoadBalancedTransport, base_url: str) -> None:
        self.transport = transport
        self.base_url = base_url.rstrip("/")

    def find_by_department_id(self, department_id: int) -> list[Employee]:
        url = f"{self.base_url}/employees/departments/{department_id}"
        payload = self.transport.get_json(url)

        if not isinstance(payload, list) or not all(
            isinstance(item, dict) for item in payload
        ):
            raise EmployeeServiceError(
                f"Expected a JSON array of employees from {url}, "
                f"got {type(payload).__name__}"
            )

        employees = [Employee.from_dict(item) for item in payload]
        logger.debug(
            "Fetched %d employees for department %s",
            len(employees),
            department_id,
        )
        return employees
