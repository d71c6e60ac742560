"""
Employee record as reported by the remote employee service.

Employees are owned by that service.  This service only holds a
request-scoped copy, so the record is a dataclass rather than a model.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class Employee:
    """A person belonging to exactly one department (by reference)."""

    id: int | None
    department_id: int | None
    name: str | None
    age: int | None
    position: str | None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Employee":
        """Build from the employee service's camelCase JSON."""
        return cls(
            id=data.get("id"),
            department_id=data.get("departmentId"),
            name=data.get("name"),
            age=data.get("age"),
            position=data.get("position"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the same camelCase keys the employee service uses."""
        return {
            "id": self.id,
            "departmentId": self.department_id,
            "name": self.name,
            "age": self.age,
            "position": self.position,
        }
