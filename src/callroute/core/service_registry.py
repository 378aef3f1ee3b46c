"""
Service Registry for callroute

Name-based lookup of external services (for example the "extphone"
emergency classification authority). Services register under a fixed
name; consumers look them up per call and must cope with a missing
entry.
"""

import threading
from typing import Any, Dict, List, Optional

from .logging import get_logger


class ServiceRegistry:
    """
    Registry mapping service names to live service handles
    """

    def __init__(self):
        self.logger = get_logger('service_registry')
        self._services: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, name: str, service: Any) -> None:
        """
        Register a service handle under a name, replacing any previous one

        Args:
            name: Well-known service name
            service: Service handle
        """
        if not name:
            raise ValueError("Service name must not be empty")

        with self._lock:
            replaced = name in self._services
            self._services[name] = service

        if replaced:
            self.logger.info(f"Replaced service: {name}")
        else:
            self.logger.info(f"Registered service: {name}")

    def unregister(self, name: str) -> bool:
        """Remove a service; returns False if nothing was registered"""
        with self._lock:
            removed = self._services.pop(name, None) is not None

        if removed:
            self.logger.info(f"Unregistered service: {name}")
        return removed

    def get_service(self, name: str) -> Optional[Any]:
        """Look up a service handle, or None when it is not available"""
        with self._lock:
            return self._services.get(name)

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._services

    def list_services(self) -> List[str]:
        with self._lock:
            return sorted(self._services)


# Global registry instance
_registry: Optional[ServiceRegistry] = None


def get_service_registry() -> ServiceRegistry:
    """Get the process-wide service registry"""
    global _registry
    if _registry is None:
        _registry = ServiceRegistry()
    return _registry
