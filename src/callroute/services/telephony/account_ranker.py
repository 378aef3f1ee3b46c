"""
Account Ranker

Orders calling accounts the way they are presented for display and
default selection: SIM accounts first, then by SIM slot, owning package,
label, and finally a deterministic identity hash backed by the full
field tuple.
"""

from functools import cmp_to_key
from typing import Callable, Iterable, List, Sequence

from ...models.account import (
    AccountCapability, AccountDescriptor, SubscriptionSlotLookup
)


Criterion = Callable[[AccountDescriptor, AccountDescriptor, SubscriptionSlotLookup], int]


def _cmp(left, right) -> int:
    # Strings compare by code point, so astral characters sort after U+E000-U+FFFF
    return (left > right) - (left < right)


def _null_to_empty(value) -> str:
    return "" if value is None else str(value)


def compare_sim_capability(a: AccountDescriptor, b: AccountDescriptor,
                           lookup: SubscriptionSlotLookup) -> int:
    """SIM accounts go first"""
    is_sim_a = a.has_capabilities(AccountCapability.SIM_SUBSCRIPTION)
    is_sim_b = b.has_capabilities(AccountCapability.SIM_SUBSCRIPTION)
    if is_sim_a == is_sim_b:
        return 0
    return -1 if is_sim_a else 1


def compare_slot_index(a: AccountDescriptor, b: AccountDescriptor,
                       lookup: SubscriptionSlotLookup) -> int:
    """
    Lower SIM slot first, only when both accounts resolve to a subscription.

    If only one side resolves this is not a tie-break in either direction;
    the comparison falls through to the next criterion.
    """
    sub_a = lookup.get_subscription(a)
    sub_b = lookup.get_subscription(b)
    if not (sub_a.is_valid and sub_b.is_valid):
        return 0
    return _cmp(sub_a.slot_index, sub_b.slot_index)


def compare_package_name(a: AccountDescriptor, b: AccountDescriptor,
                         lookup: SubscriptionSlotLookup) -> int:
    return _cmp(a.package_name, b.package_name)


def compare_label(a: AccountDescriptor, b: AccountDescriptor,
                  lookup: SubscriptionSlotLookup) -> int:
    return _cmp(_null_to_empty(a.label), _null_to_empty(b.label))


def compare_identity_hash(a: AccountDescriptor, b: AccountDescriptor,
                          lookup: SubscriptionSlotLookup) -> int:
    """Identity hash, then every field; only equal descriptors tie"""
    return _cmp((a.identity_hash(), a.identity_key()),
                (b.identity_hash(), b.identity_key()))


# Evaluated left to right; the first non-zero result wins
RANKING_CRITERIA: Sequence[Criterion] = (
    compare_sim_capability,
    compare_slot_index,
    compare_package_name,
    compare_label,
    compare_identity_hash,
)


def compare_accounts(a: AccountDescriptor, b: AccountDescriptor,
                     lookup: SubscriptionSlotLookup) -> int:
    """
    Compare two accounts for display order.

    Args:
        a: First account
        b: Second account
        lookup: Resolves each account to its subscription and slot

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if they
        are indistinguishable
    """
    for criterion in RANKING_CRITERIA:
        result = criterion(a, b, lookup)
        if result != 0:
            return result
    return 0


def sort_sim_accounts(accounts: List[AccountDescriptor],
                      lookup: SubscriptionSlotLookup) -> List[AccountDescriptor]:
    """Sort accounts in place according to display order and return the list"""
    accounts.sort(key=cmp_to_key(lambda a, b: compare_accounts(a, b, lookup)))
    return accounts


def rank_accounts(accounts: Iterable[AccountDescriptor],
                  lookup: SubscriptionSlotLookup) -> List[AccountDescriptor]:
    """Return a new list of the accounts in display order"""
    return sort_sim_accounts(list(accounts), lookup)
