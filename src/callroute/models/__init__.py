"""
Data models for callroute

Contains the account, subscription and address value types used
throughout the package.
"""

from .account import (
    AccountCapability, AccountDescriptor, AccountHandle, Address,
    ComponentName, MappingSubscriptionLookup, SubscriptionInfo,
    SubscriptionSlotLookup, NO_SUBSCRIPTION, INVALID_SUBSCRIPTION_ID,
    INVALID_SIM_SLOT_INDEX
)

__all__ = [
    'AccountCapability', 'AccountDescriptor', 'AccountHandle', 'Address',
    'ComponentName', 'MappingSubscriptionLookup', 'SubscriptionInfo',
    'SubscriptionSlotLookup', 'NO_SUBSCRIPTION', 'INVALID_SUBSCRIPTION_ID',
    'INVALID_SIM_SLOT_INDEX'
]
