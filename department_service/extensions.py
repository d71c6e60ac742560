"""
Flask extension instances, bound by ``create_app()`` via ``init_app()``.

``db`` backs the ``department`` table (``models/department.py``) and is
used only by ``DepartmentRepository``, the health check and the CLI.
``migrate`` points ``flask db`` at the revisions under ``migrations/``.
Employees are never stored, so no other table is registered.
"""

from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

migrate = Migrate()
