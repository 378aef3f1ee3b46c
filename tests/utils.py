"""
Test utilities and helper functions for callroute testing.
"""
from typing import List, Optional

from callroute.models.account import (
    AccountCapability, AccountDescriptor, AccountHandle, ComponentName,
    MappingSubscriptionLookup
)


class AccountTestHelper:
    """Helper class for building calling accounts in tests."""

    @staticmethod
    def create_account(package: str = "com.example.voip",
                       class_name: Optional[str] = None,
                       account_id: str = "1",
                       label: Optional[str] = None,
                       sim: bool = False,
                       emergency: bool = False,
                       enabled: bool = True) -> AccountDescriptor:
        """Create an account descriptor; SIM/emergency flags add capabilities."""
        capabilities = AccountCapability.CALL_PROVIDER
        if sim:
            capabilities |= AccountCapability.SIM_SUBSCRIPTION
        if emergency:
            capabilities |= AccountCapability.PLACE_EMERGENCY_CALLS

        return AccountDescriptor(
            handle=AccountHandle(
                ComponentName(package, class_name or f"{package}.CallService"),
                account_id
            ),
            label=label,
            capabilities=capabilities,
            enabled=enabled
        )

    @staticmethod
    def create_lookup(*assignments) -> MappingSubscriptionLookup:
        """
        Create a lookup from (account, subscription_id, slot_index) tuples.
        """
        lookup = MappingSubscriptionLookup()
        for account, subscription_id, slot_index in assignments:
            lookup.add(account.handle, subscription_id, slot_index)
        return lookup

    @staticmethod
    def handle_ids(accounts: List[AccountDescriptor]) -> List[str]:
        """Account handle ids in list order."""
        return [account.handle.id for account in accounts]
