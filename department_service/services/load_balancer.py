"""
Service discovery and client-side load balancing.

A logical service name (``employee-service``) is resolved through a
registry to one or more concrete instances, and a selection strategy
picks the instance used for each request.  The transport that issues
the request lives in ``transport.py``; nothing here does any I/O.
"""

import abc
import itertools
import logging
import random
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceInstance:
    """One concrete endpoint of a logical service."""

    service_name: str
    url: str  # e.g. "http://10.0.0.5:8082"


class StaticServiceRegistry:
    """
    Registry backed by a fixed mapping from configuration.

    Usage::

        registry = StaticServiceRegistry(
            {"employee-service": ["http://localhost:8082"]}
        )
        registry.get_instances("employee-service")
    """

    def __init__(self, instances: dict[str, list[str]]) -> None:
        self._instances: dict[str, list[ServiceInstance]] = {
            name: [ServiceInstance(name, url.rstrip("/")) for url in urls]
            for name, urls in instances.items()
        }
        logger.debug(
            "StaticServiceRegistry initialized: %s",
            {name: len(found) for name, found in self._instances.items()},
        )

    def get_instances(self, service_name: str) -> list[ServiceInstance]:
        """Return the registered instances for a name (empty if unknown)."""
        return list(self._instances.get(service_name, []))

    def service_names(self) -> list[str]:
        """Return all registered logical names, sorted."""
        return sorted(self._instances)


class LoadBalancer(abc.ABC):
    """Base class for instance selection strategies."""

    @abc.abstractmethod
    def choose(self, instances: list[ServiceInstance]) -> ServiceInstance:
        """Pick one instance from a non-empty list."""
        raise NotImplementedError


class RoundRobinLoadBalancer(LoadBalancer):
    """
    Rotate through instances in registry order.

    The counter is shared across request threads (waitress serves
    requests from a thread pool), so advancing it is guarded by a lock.
    """

    def __init__(self) -> None:
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def choose(self, instances: list[ServiceInstance]) -> ServiceInstance:
        with self._lock:
            position = next(self._counter)
        return instances[position % len(instances)]


class RandomLoadBalancer(LoadBalancer):
    """Pick a uniformly random instance on every call."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def choose(self, instances: list[ServiceInstance]) -> ServiceInstance:
        return self._rng.choice(instances)


# Strategy name (LOADBALANCER_STRATEGY) -> implementation.
_STRATEGIES: dict[str, type[LoadBalancer]] = {
    "round_robin": RoundRobinLoadBalancer,
    "random": RandomLoadBalancer,
}


def create_load_balancer(strategy: str) -> LoadBalancer:
    """
    Build a load balancer from its configured strategy name.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    balancer_class = _STRATEGIES.get(strategy)
    if balancer_class is None:
        raise ValueError(
            f"Unknown load balancer strategy '{strategy}'. "
            f"Valid options: {list(_STRATEGIES)}"
        )
    return balancer_class()
