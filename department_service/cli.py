"""
Custom Flask CLI commands.

These commands are registered with the app by ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check            # Verify database connectivity
    flask init-db             # Create tables without running migrations
    flask seed-departments    # Insert sample departments
    flask service-instances   # Show the employee service registry
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from department_service.extensions import db
from department_service.models.department import Department
from department_service.services import get_department_service

# Sample rows inserted by ``flask seed-departments``.
_SEED_DEPARTMENT_NAMES = ("Engineering", "Sales", "Human Resources")


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and that the department table exists.

    Useful for confirming DATABASE_URL is correct and that migrations
    (or ``flask init-db``) have been run.
    """
    click.echo(f"Connection string: {current_app.config['SQLALCHEMY_DATABASE_URI']}")

    click.echo("[1/2] Testing connection...")
    try:
        db.session.execute(db.text("SELECT 1"))
        click.secho("      ✓ Connected successfully.", fg="green")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        return

    click.echo("[2/2] Counting departments...")
    try:
        count = get_department_service().repository.count()
        click.secho(f"      ✓ {count} department(s) stored.", fg="green")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        db.session.rollback()
        click.secho(f"      ✗ Department table check failed: {exc}", fg="red")
        click.echo("        Have you run 'flask db upgrade' or 'flask init-db'?")


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables directly from the models."""
    db.create_all()
    click.secho("Tables created.", fg="green")


@click.command("seed-departments")
@with_appcontext
def seed_departments_command():
    """Insert sample departments (skipped if any department exists)."""
    service = get_department_service()
    if service.repository.count():
        click.secho("Departments already present; nothing seeded.", fg="yellow")
        return

    for name in _SEED_DEPARTMENT_NAMES:
        department = service.add(Department(name=name))
        click.echo(f"  + {department.id}: {department.name}")
    click.secho(f"Seeded {len(_SEED_DEPARTMENT_NAMES)} departments.", fg="green")


@click.command("service-instances")
@with_appcontext
def service_instances_command():
    """Show the registered instances for each logical service name."""
    registry = current_app.extensions["service_registry"]
    click.echo(f"Strategy: {current_app.config['LOADBALANCER_STRATEGY']}")

    names = registry.service_names()
    if not names:
        click.secho("No services registered. Set SERVICE_INSTANCES.", fg="yellow")
        return

    for name in names:
        click.echo(f"{name}:")
        for instance in registry.get_instances(name):
            click.echo(f"  - {instance.url}")


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_departments_command)
    app.cli.add_command(service_instances_command)
