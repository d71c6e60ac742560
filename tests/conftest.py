"""
Pytest configuration and shared fixtures.

Provides a test application backed by an in-memory SQLite database, a
test client, and a fake employee client that replaces the HTTP one so
no test ever leaves the process.
"""

import pytest

from department_service import create_app
from department_service.extensions import db as _db
from department_service.services import EXTENSION_KEY
from department_service.services.employee_client import EmployeeClient


class FakeEmployeeClient(EmployeeClient):
    """
    In-memory employee client.

    ``responses`` maps a department id to either a list of employees or
    an exception instance to raise.  Unknown ids return an empty list.
    Every lookup is recorded in ``calls`` in the order it was made.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []

    def find_by_department_id(self, department_id):
        self.calls.append(department_id)
        response = self.responses.get(department_id, [])
        if isinstance(response, Exception):
            raise response
        return list(response)


@pytest.fixture(scope="function")
def app():
    """
    Create a Flask application configured for testing.

    A fresh app (and therefore a fresh in-memory database) is created
    for every test, with the schema built from the models.
    """
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="function")
def db_session(app):  # pylint: disable=redefined-outer-name
    """Provide the SQLAlchemy session bound to the test database."""
    return _db.session


@pytest.fixture(scope="function")
def department_service(app):  # pylint: disable=redefined-outer-name
    """The DepartmentService wired by the application factory."""
    return app.extensions[EXTENSION_KEY]


@pytest.fixture(scope="function")
def employee_client(department_service):  # pylint: disable=redefined-outer-name
    """
    Install a FakeEmployeeClient into the wired department service.

    Usage in tests::

        def test_enrichment(client, employee_client):
            employee_client.responses[1] = [Employee(...)]
    """
    fake = FakeEmployeeClient()
    department_service.employee_client = fake
    return fake


@pytest.fixture(scope="function")
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_health(client):
            response = client.get("/health")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client
