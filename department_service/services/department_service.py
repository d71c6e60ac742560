"""
Department service: create and read departments, and enrich them with
employees fetched from the remote employee service.

The enrichment path (``find_all_with_employees``) issues one synchronous
lookup per department, in store order.  A failed lookup aborts the
whole operation; no partial list is ever returned.
"""

import logging

from department_service.models.department import Department
from department_service.services.department_repository import DepartmentRepository
from department_service.services.employee_client import EmployeeClient

logger = logging.getLogger(__name__)


class DepartmentService:
    """
    Orchestrates the department store and the employee client.

    Both collaborators are passed in by the application factory::

        service = DepartmentService(DepartmentRepository(), employee_client)
    """

    def __init__(
        self,
        repository: DepartmentRepository,
        employee_client: EmployeeClient,
    ) -> None:
        self.repository = repository
        self.employee_client = employee_client

    def add(self, department: Department) -> Department:
        """Store a department as given and return the stored record."""
        logger.info("Department add: %r", department)
        return self.repository.add(department)

    def find_all(self) -> list[Department]:
        """Return all departments, without employees."""
        logger.info("Department find")
        return self.repository.find_all()

    def find_by_id(self, department_id: int) -> Department:
        """Return one department; ``DepartmentNotFoundError`` propagates."""
        logger.info("Department find: id=%s", department_id)
        return self.repository.find_by_id(department_id)

    def find_all_with_employees(self) -> list[Department]:
        """
        Return all departments, each carrying its employees.

        Raises:
            EmployeeServiceError: If any single lookup fails.
        """
        logger.info("Department with employees find")
        return [
            department.with_employees(
                self.employee_client.find_by_department_id(department.id)
            )
            for department in self.repository.find_all()
        ]
