"""
Department repository: persistence for Department rows.

The only module that touches ``db.session``.  Routes and the
department service go through it for every read and write.
"""

import logging

from sqlalchemy.exc import StatementError
from sqlalchemy.orm.exc import FlushError

from department_service.errors import DepartmentNotFoundError, InvalidDepartmentError
from department_service.extensions import db
from department_service.models.department import Department

logger = logging.getLogger(__name__)


class DepartmentRepository:
    """SQLAlchemy-backed store for departments."""

    def add(self, department: Department) -> Department:
        """
        Persist a department and return it with its assigned id.

        Raises:
            InvalidDepartmentError: If the database rejects the row
                                    (e.g. missing name, duplicate id) or
                                    cannot bind a value (list name, id
                                    out of INTEGER range).
        """
        try:
            db.session.add(department)
            db.session.commit()
        # StatementError covers IntegrityError, DataError and driver binding
        # errors.  OverflowError and TypeError come straight from the driver
        # and the identity map for out-of-range or unhashable ids.
        except (StatementError, FlushError, OverflowError, TypeError) as exc:
            db.session.rollback()
            # First line only; the rest is the SQL statement and parameters.
            reason = (str(exc).splitlines() or [type(exc).__name__])[0]
            logger.warning("Rejected department %r: %s", department, reason)
            raise InvalidDepartmentError(
                f"Department could not be stored: {reason}"
            ) from exc

        logger.debug("Stored department %r", department)
        return department

    def find_all(self) -> list[Department]:
        """Return all departments ordered by id."""
        return db.session.scalars(db.select(Department).order_by(Department.id)).all()

    def find_by_id(self, department_id: int) -> Department:
        """
        Return a department by primary key.

        Raises:
            DepartmentNotFoundError: If no department has that id.
        """
        department = db.session.get(Department, department_id)
        if department is None:
            raise DepartmentNotFoundError(department_id)
        return department

    def count(self) -> int:
        """Return the number of stored departments."""
        return db.session.scalar(db.select(db.func.count(Department.id)))
