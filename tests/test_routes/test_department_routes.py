"""
Tests for the departments blueprint: the HTTP surface of the service.

The employee service is replaced by the ``employee_client`` fake, so
these tests cover routing, JSON shapes, and error translation.
"""

import pytest

from department_service.errors import (
    EmployeeServiceError,
    EmployeeServiceUnavailableError,
)
from department_service.models.employee import Employee

ANN = Employee(id=10, department_id=1, name="Ann", age=30, position="Dev")


def _create(client, **payload):
    """POST a department and return the decoded response body."""
    response = client.post("/departments", json=payload)
    assert response.status_code == 201
    return response.get_json()


class TestCreateDepartment:
    """POST /departments"""

    def test_create_assigns_id_and_echoes_name(self, client):
        body = _create(client, name="Engineering")

        assert isinstance(body["id"], int)
        assert body["name"] == "Engineering"
        assert body["employees"] == []

    def test_create_keeps_caller_supplied_id(self, client):
        body = _create(client, id=42, name="Sales")
        assert body == {"id": 42, "name": "Sales", "employees": []}

    def test_create_ignores_employees_in_payload(self, client):
        body = _create(
            client,
            name="Engineering",
            employees=[{"id": 1, "departmentId": 1, "name": "Ann"}],
        )
        assert body["employees"] == []

    def test_missing_name_is_rejected_by_store(self, client):
        response = client.post("/departments", json={"id": 3})

        assert response.status_code == 400
        assert response.get_json()["error"] == "Bad Request"

    def test_duplicate_id_is_rejected_by_store(self, client):
        _create(client, id=5, name="Engineering")

        response = client.post("/departments", json={"id": 5, "name": "Sales"})

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": ["Engineering"]},
            {"name": {"x": 1}},
            {"id": 2**70, "name": "Big"},
            {"id": [1], "name": "Listy"},
        ],
        ids=["list-name", "object-name", "id-out-of-range", "list-id"],
    )
    def test_unbindable_values_are_rejected_by_store(self, client, payload):
        response = client.post("/departments", json=payload)

        assert response.status_code == 400
        assert response.get_json()["error"] == "Bad Request"

        # The rollback leaves the store usable for the next request.
        assert _create(client, name="Engineering")["name"] == "Engineering"

    def test_non_object_body_returns_400(self, client):
        response = client.post("/departments", json=["Engineering"])

        assert response.status_code == 400
        assert "JSON object" in response.get_json()["message"]

    def test_malformed_json_returns_400(self, client):
        response = client.post(
            "/departments", data="{not json", content_type="application/json"
        )
        assert response.status_code == 400


class TestListDepartments:
    """GET /departments"""

    def test_empty_store_returns_empty_list(self, client):
        response = client.get("/departments")

        assert response.status_code == 200
        assert response.get_json() == []

    def test_lists_created_departments_in_id_order(self, client):
        _create(client, id=2, name="Sales")
        _create(client, id=1, name="Engineering")

        response = client.get("/departments")

        assert response.get_json() == [
            {"id": 1, "name": "Engineering", "employees": []},
            {"id": 2, "name": "Sales", "employees": []},
        ]

    def test_list_never_calls_employee_service(self, client, employee_client):
        _create(client, name="Engineering")

        client.get("/departments")

        assert employee_client.calls == []


class TestGetDepartment:
    """GET /departments/<id>"""

    def test_returns_matching_department(self, client):
        created = _create(client, name="Engineering")

        response = client.get(f"/departments/{created['id']}")

        assert response.status_code == 200
        assert response.get_json() == created

    def test_unknown_id_returns_404(self, client):
        response = client.get("/departments/999")

        assert response.status_code == 404
        body = response.get_json()
        assert body["error"] == "Not Found"
        assert "999" in body["message"]


class TestListDepartmentsWithEmployees:
    """GET /departments/with-employees"""

    def test_attaches_employees_per_department(self, client, employee_client):
        _create(client, id=1, name="Engineering")
        _create(client, id=2, name="Sales")
        employee_client.responses[1] = [ANN]
        employee_client.responses[2] = []

        response = client.get("/departments/with-employees")

        assert response.status_code == 200
        assert response.get_json() == [
            {
                "id": 1,
                "name": "Engineering",
                "employees": [
                    {
                        "id": 10,
                        "departmentId": 1,
                        "name": "Ann",
                        "age": 30,
                        "position": "Dev",
                    }
                ],
            },
            {"id": 2, "name": "Sales", "employees": []},
        ]
        assert employee_client.calls == [1, 2]

    def test_plain_list_stays_empty_after_enrichment(self, client, employee_client):
        _create(client, id=1, name="Engineering")
        employee_client.responses[1] = [ANN]

        client.get("/departments/with-employees")
        response = client.get("/departments")

        assert response.get_json() == [
            {"id": 1, "name": "Engineering", "employees": []}
        ]

    def test_remote_error_returns_502(self, client, employee_client):
        _create(client, id=1, name="Engineering")
        _create(client, id=2, name="Sales")
        employee_client.responses[2] = EmployeeServiceError(
            "GET returned status 500", status=500
        )

        response = client.get("/departments/with-employees")

        assert response.status_code == 502
        assert response.get_json()["error"] == "Bad Gateway"

    def test_remote_unavailable_returns_503(self, client, employee_client):
        _create(client, id=1, name="Engineering")
        employee_client.responses[1] = EmployeeServiceUnavailableError(
            "No instances registered for service 'employee-service'"
        )

        response = client.get("/departments/with-employees")

        assert response.status_code == 503
        assert "employee-service" in response.get_json()["message"]
