"""
Model package: imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.

  - department.py -> department table
  - employee.py   -> not persisted (remote employee service record)
"""

from department_service.models.department import Department  # noqa: F401
from department_service.models.employee import Employee  # noqa: F401
