"""
Routes for the main blueprint: health check.
"""

from flask import current_app
from sqlalchemy import text

from department_service.blueprints.main import bp
from department_service.extensions import db


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the app is running and can reach the database.
    Also reports how many instances are registered per logical service
    name; the employee service itself is not contacted.
    """
    registry = current_app.extensions["service_registry"]
    services = {
        name: len(registry.get_instances(name)) for name in registry.service_names()
    }

    try:
        db.session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected", "services": services}, 200
    except Exception as exc:  # pylint: disable=broad-except
        return {"status": "unhealthy", "database": str(exc), "services": services}, 503
