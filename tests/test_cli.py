"""
Tests for the custom Flask CLI commands.
"""

from department_service.models.department import Department


class TestSeedDepartments:

    def test_seeds_sample_departments(self, app, department_service):
        result = app.test_cli_runner().invoke(args=["seed-departments"])

        assert result.exit_code == 0
        assert [d.name for d in department_service.find_all()] == [
            "Engineering",
            "Sales",
            "Human Resources",
        ]

    def test_skips_when_departments_exist(self, app, department_service):
        department_service.add(Department(name="Finance"))

        result = app.test_cli_runner().invoke(args=["seed-departments"])

        assert "nothing seeded" in result.output
        assert department_service.repository.count() == 1


class TestServiceInstances:

    def test_lists_registered_instances(self, app):
        result = app.test_cli_runner().invoke(args=["service-instances"])

        assert result.exit_code == 0
        assert "Strategy: round_robin" in result.output
        assert "employee-service:" in result.output
        assert "http://employee-1.test:8082" in result.output


class TestDbCheck:

    def test_reports_department_count(self, app):
        result = app.test_cli_runner().invoke(args=["db-check"])

        assert result.exit_code == 0
        assert "0 department(s) stored" in result.output
