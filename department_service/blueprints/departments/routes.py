"""
Routes for the departments blueprint.

Error translation happens in the application factory's error handlers:
``DepartmentNotFoundError`` becomes 404 and employee service failures
become 502/503.  Routes only parse input and serialize output.
"""

from flask import abort, jsonify, request

from department_service.blueprints.departments import bp
from department_service.models.department import Department
from department_service.services import get_department_service


@bp.route("", methods=["POST"])
def add():
    """Create a department from a JSON body; ``id`` is optional."""
    payload = request.get_json()
    if not isinstance(payload, dict):
        abort(400, description="Request body must be a JSON object.")

    department = get_department_service().add(Department.from_dict(payload))
    return department.to_dict(), 201


@bp.route("", methods=["GET"])
def find_all():
    """List all departments without employees."""
    departments = get_department_service().find_all()
    return jsonify([department.to_dict() for department in departments])


@bp.route("/<int:department_id>", methods=["GET"])
def find_by_id(department_id):
    """Return a single department."""
    return get_department_service().find_by_id(department_id).to_dict()


@bp.route("/with-employees", methods=["GET"])
def find_all_with_employees():
    """List all departments, each with its employees attached."""
    departments = get_department_service().find_all_with_employees()
    return jsonify([department.to_dict() for department in departments])
