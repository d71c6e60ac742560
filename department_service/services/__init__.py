"""
Service layer package.

Services encapsulate the business logic; routes never access the
database or the employee service directly.  The application factory
builds one ``DepartmentService`` per app and stores it in
``app.extensions``; routes fetch it with::

    from department_service.services import get_department_service
"""

from flask import current_app

from department_service.services.department_service import DepartmentService

# Key under which the wired service is stored in ``app.extensions``.
EXTENSION_KEY = "department_service"


def get_department_service() -> DepartmentService:
    """Return the department service wired into the current app."""
    return current_app.extensions[EXTENSION_KEY]
