"""
Emergency Identity Provider

The system telephony service is treated differently from third-party
calling services in some situations (emergency calls, trust decisions).
This module knows its fixed component identity and synthesizes the
fallback account used for emergency calls before any real account has
registered.
"""

from typing import Optional

from ...models.account import (
    AccountCapability, AccountDescriptor, AccountHandle, ComponentName
)


TELEPHONY_PACKAGE_NAME = "com.android.phone"

PSTN_CALL_SERVICE_CLASS_NAME = "com.android.services.telephony.TelephonyConnectionService"

PSTN_COMPONENT_NAME = ComponentName(TELEPHONY_PACKAGE_NAME, PSTN_CALL_SERVICE_CLASS_NAME)

DEFAULT_EMERGENCY_ACCOUNT_ID = "E"

DEFAULT_EMERGENCY_ACCOUNT_HANDLE = AccountHandle(PSTN_COMPONENT_NAME, DEFAULT_EMERGENCY_ACCOUNT_ID)

DEFAULT_EMERGENCY_CAPABILITIES = (
    AccountCapability.SIM_SUBSCRIPTION
    | AccountCapability.CALL_PROVIDER
    | AccountCapability.PLACE_EMERGENCY_CALLS
)


def get_default_emergency_account() -> AccountDescriptor:
    """
    Fallback account for emergency calls in the rare case that telephony
    has not registered any accounts yet.

    Details about this account are not meant for display, so the label is
    just the handle id and no description is populated.

    Returns:
        An enabled, SIM-backed, emergency-capable account bound to the
        system telephony component
    """
    return AccountDescriptor(
        handle=DEFAULT_EMERGENCY_ACCOUNT_HANDLE,
        label=DEFAULT_EMERGENCY_ACCOUNT_ID,
        capabilities=DEFAULT_EMERGENCY_CAPABILITIES,
        enabled=True
    )


def is_pstn_component_name(component_name: Optional[ComponentName]) -> bool:
    """Check whether a component is the system telephony connection service"""
    return PSTN_COMPONENT_NAME == component_name
