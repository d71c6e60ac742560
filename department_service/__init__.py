"""
Application factory for the Department service.

Usage::

    from department_service import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask
from werkzeug.exceptions import HTTPException

from .config import config_by_name
from .errors import (
    DepartmentNotFoundError,
    EmployeeServiceError,
    EmployeeServiceUnavailableError,
    InvalidDepartmentError,
)
from .extensions import db, migrate

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    if config_name == "production":
        config_class.validate_production_secrets(app.config)

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Wire services (store, transport, employee client) -----------------
    _register_services(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)
    migrate.init_app(app, db)

    # Imported so Flask-Migrate sees every table.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_services(app: Flask) -> None:
    """
    Build the department service and its collaborators from config.

    Objects are stored in ``app.extensions`` so routes, CLI commands
    and tests share one instance per app.  Tests swap the employee
    client by replacing ``DepartmentService.employee_client``.
    """
    # pylint: disable=import-outside-toplevel
    from .services import EXTENSION_KEY
    from .services.department_repository import DepartmentRepository
    from .services.department_service import DepartmentService
    from .services.employee_client import HttpEmployeeClient
    from .services.load_balancer import StaticServiceRegistry, create_load_balancer
    from .services.transport import LoadBalancedTransport

    registry = StaticServiceRegistry(app.config["SERVICE_INSTANCES"])
    load_balancer = create_load_balancer(app.config["LOADBALANCER_STRATEGY"])
    transport = LoadBalancedTransport(
        registry,
        load_balancer,
        timeout=app.config.get("EMPLOYEE_SERVICE_TIMEOUT"),
    )
    employee_client = HttpEmployeeClient(
        transport, app.config["EMPLOYEE_SERVICE_URL"]
    )

    app.extensions["service_registry"] = registry
    app.extensions[EXTENSION_KEY] = DepartmentService(
        DepartmentRepository(), employee_client
    )

    logger.debug(
        "Employee client wired: base_url=%s, strategy=%s",
        app.config["EMPLOYEE_SERVICE_URL"],
        app.config["LOADBALANCER_STRATEGY"],
    )


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports.
    """
    # pylint: disable=import-outside-toplevel

    # Main blueprint: health check at /health.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Departments: CRUD and the employee enrichment path.
    from .blueprints.departments import bp as departments_bp

    app.register_blueprint(departments_bp, url_prefix="/departments")


def _error_response(error: str, message: str, status: int):
    """Build the JSON body shared by every error handler."""
    return {"error": error, "message": message}, status


def _register_error_handlers(app: Flask) -> None:
    """Translate domain errors and HTTP errors into JSON responses."""

    @app.errorhandler(DepartmentNotFoundError)
    def department_not_found(error):
        """Unknown department id."""
        return _error_response("Not Found", str(error), 404)

    @app.errorhandler(InvalidDepartmentError)
    def invalid_department(error):
        """The store rejected the department."""
        return _error_response("Bad Request", str(error), 400)

    @app.errorhandler(EmployeeServiceUnavailableError)
    def employee_service_unavailable(error):
        """No employee service instance could be resolved or reached."""
        logger.error("Employee service unavailable: %s", error)
        return _error_response("Service Unavailable", str(error), 503)

    @app.errorhandler(EmployeeServiceError)
    def employee_service_error(error):
        """The employee service answered with an error."""
        logger.error("Employee service error: %s", error)
        return _error_response("Bad Gateway", str(error), 502)

    @app.errorhandler(HTTPException)
    def http_error(error):
        """Routing and request parsing errors (404, 405, 400, 415)."""
        return _error_response(error.name, error.description, error.code)

    @app.errorhandler(500)
    def internal_error(error):  # pylint: disable=unused-argument
        """Handle 500 Internal Server Error."""
        db.session.rollback()
        return _error_response(
            "Internal Server Error", "An unexpected error occurred.", 500
        )


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    from .cli import register_commands  # pylint: disable=import-outside-toplevel

    register_commands(app)


def _configure_logging(app: Flask) -> None:
    """
    Set up application logging.

    The level comes from ``LOG_LEVEL``.  In debug mode the SQLAlchemy
    engine and urllib3 pool loggers are quieted to keep output readable.
    """
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)
