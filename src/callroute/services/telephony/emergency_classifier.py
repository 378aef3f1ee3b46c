"""
Emergency Number Classifier

Asks the external classification authority whether an address is a local
or potential-local emergency number. Failures are absorbed: an
unavailable authority, a missing service handle or a transport error all
yield False, which callers must read as "not confirmed" rather than as a
confident negative.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from ...core.config import ConfigurationManager
from ...core.logging import get_logger, get_structured_logger
from ...core.service_registry import ServiceRegistry, get_service_registry
from ...models.account import Address
from .ext_telephony import (
    EXT_TELEPHONY_SERVICE_NAME, HttpExtTelephonyClient, RemoteServiceError
)


class EmergencyNumberClassifier(ABC):
    """Classifies dialed addresses as emergency numbers"""

    @abstractmethod
    def is_local_emergency_number(self, address: str) -> bool:
        pass

    @abstractmethod
    def is_potential_local_emergency_number(self, address: str) -> bool:
        pass


class UnavailableEmergencyClassifier(EmergencyNumberClassifier):
    """Classifier used when no authority is configured; never confirms"""

    def is_local_emergency_number(self, address: str) -> bool:
        return False

    def is_potential_local_emergency_number(self, address: str) -> bool:
        return False


class RemoteEmergencyClassifier(EmergencyNumberClassifier):
    """
    Classifier backed by the authority registered under a service name.

    The service is looked up on every call. Nothing is cached, retried or
    backed off; each call is one blocking round trip on the caller's thread.
    """

    def __init__(self, registry: ServiceRegistry,
                 service_name: str = EXT_TELEPHONY_SERVICE_NAME):
        self.registry = registry
        self.service_name = service_name
        self.logger = get_logger('emergency_classifier')

    def is_local_emergency_number(self, address: str) -> bool:
        return self._query('is_local_emergency_number', address)

    def is_potential_local_emergency_number(self, address: str) -> bool:
        return self._query('is_potential_local_emergency_number', address)

    def _query(self, operation: str, address: str) -> bool:
        service = self.registry.get_service(self.service_name)
        if service is None:
            self.logger.error(f"{operation}: service '{self.service_name}' is not available")
            return False

        try:
            result = getattr(service, operation)(address)
        except RemoteServiceError as e:
            self.logger.error(f"{operation}: remote call to '{self.service_name}' failed: {e}")
            return False
        except Exception as e:
            self.logger.error(f"{operation}: service '{self.service_name}' raised an error: {e}",
                              exc_info=True)
            return False

        return result is True


def create_emergency_classifier(config: ConfigurationManager,
                                registry: Optional[ServiceRegistry] = None) -> EmergencyNumberClassifier:
    """
    Select the classifier variant at startup.

    When a base URL is configured and nothing is registered under the
    service name yet, an HTTP client is registered for it.

    Args:
        config: Loaded configuration manager
        registry: Service registry to use (defaults to the global one)

    Returns:
        The classifier the call manager should consult
    """
    slog = get_structured_logger('emergency_classifier')

    if not config.is_emergency_classifier_enabled():
        slog.info("emergency_classifier_selected", variant="unavailable")
        return UnavailableEmergencyClassifier()

    registry = registry or get_service_registry()
    service_name = config.get_emergency_service_name()
    base_url = config.get_emergency_service_url()

    if base_url and not registry.is_registered(service_name):
        registry.register(service_name, HttpExtTelephonyClient(
            base_url, timeout=config.get_emergency_service_timeout()
        ))

    slog.info("emergency_classifier_selected", variant="remote",
              service_name=service_name, base_url=base_url)
    return RemoteEmergencyClassifier(registry, service_name)


_unavailable = UnavailableEmergencyClassifier()


def is_local_emergency_number(address: str,
                              classifier: Optional[EmergencyNumberClassifier] = None) -> bool:
    """Check an address against the given classifier (False if none)"""
    return (classifier or _unavailable).is_local_emergency_number(address)


def is_potential_local_emergency_number(address: str,
                                        classifier: Optional[EmergencyNumberClassifier] = None) -> bool:
    """Check whether an address could be an emergency number (False if no classifier)"""
    return (classifier or _unavailable).is_potential_local_emergency_number(address)


def should_process_as_emergency(handle: Optional[Union[Address, str]],
                                classifier: Optional[EmergencyNumberClassifier] = None) -> bool:
    """
    Decide whether a dialed handle should be routed as an emergency call

    Args:
        handle: Handle URI such as 'tel:911', or a parsed Address
        classifier: Classifier to consult

    Returns:
        True only when the classifier confirms the number
    """
    if handle is None:
        return False
    address = Address.parse(handle)
    return is_local_emergency_number(address.scheme_specific_part, classifier)
