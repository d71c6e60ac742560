"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``department_service/__init__.py`` selects the
appropriate config based on the FLASK_ENV environment variable.

Employee service discovery is configured with two values:
    - ``EMPLOYEE_SERVICE_URL``: base URL whose host is the *logical*
      service name (e.g. ``http://employee-service``), never a real host.
    - ``SERVICE_INSTANCES``: the static registry mapping logical names
      to concrete endpoints, e.g.
      ``employee-service=http://10.0.0.5:8082,http://10.0.0.6:8082``.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)

# Sentinel for detecting unset SECRET_KEY in production.
_DEFAULT_SECRET_KEY = "dev-secret-change-me"

# Load-balancing strategies understood by the transport layer.
LOADBALANCER_STRATEGIES = ("round_robin", "random")


def parse_service_instances(raw: str) -> dict[str, list[str]]:
    """
    Parse a ``SERVICE_INSTANCES`` string into a registry mapping.

    Format: ``name=url1,url2;other-name=url3``.  Whitespace around
    names and URLs is ignored, as are empty entries.

    Args:
        raw: The raw configuration string.

    Returns:
        Dict of logical service name to a list of instance URLs.

    Raises:
        ValueError: If an entry has no ``=`` separator or an empty name.
    """
    instances: dict[str, list[str]] = {}

    for entry in raw.split(";"):
        entry = entry.strip()
        if not entry:
            continue

        name, sep, urls = entry.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(
                f"Invalid SERVICE_INSTANCES entry '{entry}'. "
                "Expected 'service-name=http://host:port[,http://host:port]'."
            )

        instances.setdefault(name, []).extend(
            url.strip().rstrip("/") for url in urls.split(",") if url.strip()
        )

    return instances


def _optional_float(value: str | None) -> float | None:
    """Convert an optional env var string to float, treating '' as unset."""
    if value is None or not value.strip():
        return None
    return float(value)


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Secrets and connection strings are loaded from environment variables
    so they never appear in source control.
    """

    # -- Flask core --------------------------------------------------------
    SECRET_KEY: str = os.environ.get("SECRET_KEY", _DEFAULT_SECRET_KEY)

    # -- SQLAlchemy --------------------------------------------------------
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", "sqlite:///departments.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Echo SQL statements to the log for debugging (override per env).
    SQLALCHEMY_ECHO: bool = False

    # -- Employee service --------------------------------------------------
    EMPLOYEE_SERVICE_URL: str = os.environ.get(
        "EMPLOYEE_SERVICE_URL", "http://employee-service"
    )

    # Static service registry consulted by the load-balanced transport.
    SERVICE_INSTANCES: dict[str, list[str]] = parse_service_instances(
        os.environ.get("SERVICE_INSTANCES", "employee-service=http://localhost:8082")
    )

    # Instance selection strategy: "round_robin" or "random".
    LOADBALANCER_STRATEGY: str = os.environ.get(
        "LOADBALANCER_STRATEGY", "round_robin"
    )

    # Per-request timeout in seconds.  None leaves urllib3's default.
    EMPLOYEE_SERVICE_TIMEOUT: float | None = _optional_float(
        os.environ.get("EMPLOYEE_SERVICE_TIMEOUT")
    )

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # =====================================================================
    # Production validation helpers
    # =====================================================================

    @classmethod
    def validate_production_secrets(cls, app_config: dict) -> None:
        """
        Verify that required settings are sane for production.

        Raises ``RuntimeError`` for hard requirements and logs warnings
        for soft requirements.

        Args:
            app_config: The ``app.config`` dict after loading the
                        config class.

        Raises:
            RuntimeError: If any critical value is missing or still
                          set to its insecure default.
        """
        errors: list[str] = []

        if app_config.get("SECRET_KEY") == _DEFAULT_SECRET_KEY:
            errors.append(
                "SECRET_KEY is still the insecure default. "
                "Generate one with: python -c "
                '"import secrets; print(secrets.token_hex(32))"'
            )

        if errors:
            combined = "\n  - ".join(errors)
            raise RuntimeError(f"Production configuration errors:\n  - {combined}")

        # An empty registry is legal but every enrichment call will fail.
        if not app_config.get("SERVICE_INSTANCES"):
            _logger.warning(
                "SERVICE_INSTANCES is empty; /departments/with-employees "
                "will answer 503 until instances are registered."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: verbose logging, SQL echo enabled."""

    DEBUG: bool = True
    SQLALCHEMY_ECHO: bool = True
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """
    Testing environment: in-memory SQLite and a fixed fake registry.

    The registry points at a non-routable placeholder; tests replace the
    employee client or the HTTP pool, so nothing is ever contacted.
    """

    TESTING: bool = True

    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL", "sqlite:///:memory:"
    )
    SERVICE_INSTANCES: dict[str, list[str]] = {
        "employee-service": ["http://employee-1.test:8082"],
    }
    LOADBALANCER_STRATEGY: str = "round_robin"
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(BaseConfig):
    """
    Production environment: strict settings, no debug output.

    The application factory calls ``validate_production_secrets()`` at
    startup and will refuse to launch if critical values are missing.
    """

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
