"""
Load-balanced HTTP transport built on urllib3.

URLs handed to the transport use a logical service name as their host,
e.g. ``http://employee-service/employees/departments/1``.  Before each
request the host is resolved through the registry, one instance is
chosen by the load balancer, and the URL is rewritten to point at it.

No retry policy is configured here; urllib3 defaults apply.  Connection
failures and unresolvable names raise ``EmployeeServiceUnavailableError``;
non-2xx answers and bad JSON raise ``EmployeeServiceError``.
"""

import json
import logging
from typing import Any

import urllib3
from urllib3.util import parse_url

from department_service.errors import (
    EmployeeServiceError,
    EmployeeServiceUnavailableError,
)
from department_service.services.load_balancer import (
    LoadBalancer,
    StaticServiceRegistry,
)

logger = logging.getLogger(__name__)


class LoadBalancedTransport:
    """
    Resolve logical service names and issue GET requests.

    One ``PoolManager`` is shared by all request threads.  Any object
    with a compatible ``request()`` method may be passed as ``http``.
    """

    def __init__(
        self,
        registry: StaticServiceRegistry,
        load_balancer: LoadBalancer,
        timeout: float | None = None,
        http: urllib3.PoolManager | None = None,
    ) -> None:
        self.registry = registry
        self.load_balancer = load_balancer
        self.timeout = timeout
        self._http = http or urllib3.PoolManager()

    # =================================================================
    # Public API
    # =================================================================

    def resolve(self, url: str) -> str:
        """
        Rewrite a logical URL to a concrete instance URL.

        Args:
            url: URL whose host is a logical service name.

        Returns:
            The same path and query on the chosen instance.

        Raises:
            EmployeeServiceUnavailableError: If no instance is registered.
        """
        parsed = parse_url(url)
        service_name = parsed.host or ""

        instances = self.registry.get_instances(service_name)
        if not instances:
            raise EmployeeServiceUnavailableError(
                f"No instances registered for service '{service_name}'"
            )

        instance = self.load_balancer.choose(instances)
        logger.debug("Resolved %s -> %s", service_name, instance.url)
        return f"{instance.url}{parsed.request_uri}"

    def get_json(self, url: str) -> Any:
        """
        Send a GET to a logical URL and decode the JSON body.

        Returns:
            The decoded JSON document.

        Raises:
            EmployeeServiceUnavailableError: Unresolvable name or network error.
            EmployeeServiceError: Non-2xx status or invalid JSON.
        """
        target = self.resolve(url)

        request_kwargs: dict[str, Any] = {
            "headers": {"Accept": "application/json"},
        }
        if self.timeout is not None:
            request_kwargs["timeout"] = self.timeout

        try:
            response = self._http.request("GET", target, **request_kwargs)
        except urllib3.exceptions.HTTPError as exc:
            logger.error("HTTPError calling %s: %s", target, exc)
            raise EmployeeServiceUnavailableError(
                f"Request to {target} failed: {exc}"
            ) from exc

        if not 200 <= response.status < 300:
            logger.error("GET %s returned status %d", target, response.status)
            raise EmployeeServiceError(
                f"GET {target} returned status {response.status}",
                status=response.status,
            )

        try:
            return json.loads(response.data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("Invalid JSON from %s: %s", target, exc)
            raise EmployeeServiceError(
                f"Invalid JSON from {target}: {exc}",
                status=response.status,
            ) from exc
