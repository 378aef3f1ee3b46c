"""
Account data models for callroute

Defines the calling-account value types consumed by the ranking and
emergency routing helpers: component names, account handles, capability
flags, account descriptors, and subscription slot lookups.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntFlag
from typing import Dict, Mapping, Optional, Tuple, Union
import zlib


INVALID_SUBSCRIPTION_ID = -1
INVALID_SIM_SLOT_INDEX = -1


class AccountCapability(IntFlag):
    """Capability flags an account may advertise"""
    NONE = 0
    CONNECTION_MANAGER = 0x1
    CALL_PROVIDER = 0x2
    SIM_SUBSCRIPTION = 0x4
    VIDEO_CALLING = 0x8
    PLACE_EMERGENCY_CALLS = 0x10


@dataclass(frozen=True)
class ComponentName:
    """Identity of an installed component: owning package plus class name"""
    package_name: str
    class_name: str

    def flatten_to_string(self) -> str:
        """Render as 'package/class'"""
        return f"{self.package_name}/{self.class_name}"

    @classmethod
    def unflatten_from_string(cls, value: Optional[str]) -> Optional['ComponentName']:
        """
        Parse a 'package/class' string.

        A class name starting with '.' is relative to the package.
        Returns None when the string is not in that form.
        """
        if not value:
            return None

        sep = value.find('/')
        if sep <= 0 or sep + 1 >= len(value):
            return None

        package_name = value[:sep]
        class_name = value[sep + 1:]
        if class_name.startswith('.'):
            class_name = package_name + class_name

        return cls(package_name=package_name, class_name=class_name)

    def __str__(self) -> str:
        return self.flatten_to_string()


@dataclass(frozen=True)
class AccountHandle:
    """Opaque account identifier: owning component plus a short id"""
    component_name: ComponentName
    id: str


@dataclass(frozen=True)
class AccountDescriptor:
    """A registered calling account (SIM or app-provided calling service)"""
    handle: AccountHandle
    label: Optional[str] = None
    capabilities: AccountCapability = AccountCapability.NONE
    enabled: bool = False

    def has_capabilities(self, capabilities: AccountCapability) -> bool:
        """Check that every given capability flag is set"""
        return (self.capabilities & capabilities) == capabilities

    @property
    def package_name(self) -> str:
        return self.handle.component_name.package_name

    def identity_hash(self) -> int:
        """Deterministic hash over all fields, stable across processes"""
        component = self.handle.component_name
        key = '\x00'.join([
            component.package_name,
            component.class_name,
            self.handle.id,
            self.label if self.label is not None else '\x01',
            str(int(self.capabilities)),
            '1' if self.enabled else '0',
        ])
        return zlib.crc32(key.encode('utf-8'))

    def identity_key(self) -> Tuple[str, str, str, bool, str, int, bool]:
        """Every field as a comparable tuple; distinct descriptors never share one"""
        component = self.handle.component_name
        return (
            component.package_name,
            component.class_name,
            self.handle.id,
            self.label is not None,
            self.label or '',
            int(self.capabilities),
            self.enabled,
        )

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary"""
        return {
            'component': self.handle.component_name.flatten_to_string(),
            'id': self.handle.id,
            'label': self.label,
            'capabilities': int(self.capabilities),
            'enabled': self.enabled
        }


@dataclass(frozen=True)
class SubscriptionInfo:
    """Subscription id and the physical SIM slot it lives in"""
    subscription_id: int
    slot_index: int = INVALID_SIM_SLOT_INDEX

    @property
    def is_valid(self) -> bool:
        return self.subscription_id != INVALID_SUBSCRIPTION_ID


NO_SUBSCRIPTION = SubscriptionInfo(INVALID_SUBSCRIPTION_ID, INVALID_SIM_SLOT_INDEX)


class SubscriptionSlotLookup(ABC):
    """Maps an account to its subscription; supplied by the account registry"""

    @abstractmethod
    def get_subscription(self, account: AccountDescriptor) -> SubscriptionInfo:
        """
        Resolve the subscription backing an account.

        Implementations must be total: return NO_SUBSCRIPTION rather
        than raising for accounts they do not know.
        """
        pass


class MappingSubscriptionLookup(SubscriptionSlotLookup):
    """In-memory lookup keyed by account handle"""

    def __init__(self, subscriptions: Optional[Mapping[AccountHandle, SubscriptionInfo]] = None):
        self.subscriptions: Dict[AccountHandle, SubscriptionInfo] = dict(subscriptions or {})

    def add(self, handle: AccountHandle, subscription_id: int, slot_index: int) -> None:
        self.subscriptions[handle] = SubscriptionInfo(subscription_id, slot_index)

    def get_subscription(self, account: AccountDescriptor) -> SubscriptionInfo:
        return self.subscriptions.get(account.handle, NO_SUBSCRIPTION)


@dataclass(frozen=True)
class Address:
    """A dialable handle URI such as 'tel:911'"""
    scheme: str
    scheme_specific_part: str

    @classmethod
    def parse(cls, value: Union[str, 'Address']) -> 'Address':
        """Split 'scheme:part'; a string without a scheme is treated as a tel number"""
        if isinstance(value, Address):
            return value

        scheme, sep, part = value.partition(':')
        if not sep or not scheme.isalpha():
            return cls(scheme='tel', scheme_specific_part=value)

        return cls(scheme=scheme.lower(), scheme_specific_part=part)

    def __str__(self) -> str:
        return f"{self.scheme}:{self.scheme_specific_part}"
