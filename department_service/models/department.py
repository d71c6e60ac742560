"""
Department model: the only table owned by this service.

``employees`` is not a column.  It is a plain attribute populated by
the enrichment read path from the remote employee service and is
always empty on rows loaded from the database.
"""

from typing import Any

from sqlalchemy import orm

from department_service.extensions import db
from department_service.models.employee import Employee


class Department(db.Model):
    """A named organizational unit, optionally carrying its employees."""

    __tablename__ = "department"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(200), nullable=False)

    def __init__(self, employees: list[Employee] | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.employees: list[Employee] = list(employees or [])

    @orm.reconstructor
    def _init_on_load(self) -> None:
        """Give rows loaded by the ORM an empty employee list."""
        self.employees = []

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Department":
        """
        Build an unsaved department from a request payload.

        ``id`` is optional; when omitted the store assigns one.  Unknown
        keys and any ``employees`` sent by the caller are ignored since
        employees are never stored here.
        """
        return cls(id=data.get("id"), name=data.get("name"))

    def with_employees(self, employees: list[Employee]) -> "Department":
        """
        Return a detached copy of this department carrying ``employees``.

        The copy is never added to the session, so the persisted row in
        the identity map keeps an empty employee list.
        """
        return Department(id=self.id, name=self.name, employees=employees)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "id": self.id,
            "name": self.name,
            "employees": [employee.to_dict() for employee in self.employees],
        }

    def __repr__(self) -> str:
        return f"<Department {self.id}: {self.name}>"
