"""
Waitress entry point for the Department service.

Usage::

    flask --app wsgi db upgrade     # create the department table once
    python wsgi.py                  # serve on WAITRESS_HOST:WAITRESS_PORT

The employee service must be reachable at one of the URLs registered
for ``employee-service`` in ``SERVICE_INSTANCES``; otherwise
``/departments/with-employees`` answers 503 while the other routes keep
working.  Requests run on WAITRESS_THREADS worker threads that share
one round-robin balancer.
"""

import os

from waitress import serve

from department_service import create_app

app = create_app(os.environ.get("FLASK_ENV", "production"))

if __name__ == "__main__":
    host = os.environ.get("WAITRESS_HOST", "127.0.0.1")
    port = int(os.environ.get("WAITRESS_PORT", "8081"))
    print(f"Starting Department service on {host}:{port}")
    threads = int(os.environ.get("WAITRESS_THREADS", "4"))
    serve(app, host=host, port=port, threads=threads)
