"""
Default Component Resolver

Picks the default dialer and in-call UI components: the first installed
candidate reported by component discovery that is also on a configured
allow-list.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set

from ...core.config import ConfigurationManager
from ...core.logging import get_logger
from ...models.account import ComponentName


DIAL_CAPABILITY = "android.intent.action.DIAL"

IN_CALL_SERVICE_CAPABILITY = "android.telecom.InCallService"


class ComponentDiscovery(ABC):
    """Platform service listing installed components for a capability"""

    @abstractmethod
    def query(self, capability: str) -> List[ComponentName]:
        """Return installed candidates able to handle the capability"""
        pass


def _normalize_allow_list(entries: Iterable[str]) -> Set[ComponentName]:
    allowed = set()
    for entry in entries:
        component = ComponentName.unflatten_from_string(entry)
        if component is not None:
            allowed.add(component)
    return allowed


def _first_allowed(candidates: Iterable[ComponentName],
                   allow_list: Iterable[str]) -> Optional[ComponentName]:
    allowed = _normalize_allow_list(allow_list)
    for candidate in candidates:
        if candidate in allowed:
            return candidate
    return None


def get_dialer_component_name(discovery: ComponentDiscovery,
                              allow_list: Iterable[str]) -> Optional[ComponentName]:
    """First installed dialer that is on the allow-list, in discovery order"""
    return _first_allowed(discovery.query(DIAL_CAPABILITY), allow_list)


def get_in_call_component_name(discovery: ComponentDiscovery,
                               allow_list: Iterable[str]) -> Optional[ComponentName]:
    """First installed in-call service that is on the allow-list, in discovery order"""
    return _first_allowed(discovery.query(IN_CALL_SERVICE_CAPABILITY), allow_list)


class ComponentResolver:
    """Resolves default components using allow-lists from configuration"""

    def __init__(self, discovery: ComponentDiscovery, config: ConfigurationManager):
        self.discovery = discovery
        self.config = config
        self.logger = get_logger('component_resolver')

    def get_dialer_component_name(self) -> Optional[ComponentName]:
        component = get_dialer_component_name(
            self.discovery, self.config.get_dialer_default_classes()
        )
        if component is None:
            self.logger.warning("No allow-listed dialer component is installed")
        return component

    def get_in_call_component_name(self) -> Optional[ComponentName]:
        component = get_in_call_component_name(
            self.discovery, self.config.get_incall_default_classes()
        )
        if component is None:
            self.logger.warning("No allow-listed in-call component is installed")
        return component
