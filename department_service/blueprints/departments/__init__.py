"""
Departments blueprint: create and read departments, optionally
enriched with employees from the employee service.
"""

from flask import Blueprint

bp = Blueprint("departments", __name__)

# Import routes after blueprint creation to avoid circular imports.
from department_service.blueprints.departments import routes  # noqa: E402, F401
