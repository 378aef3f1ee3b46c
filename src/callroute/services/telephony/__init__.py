"""
Telephony Account Services

Account selection and emergency routing helpers for the call manager:
- Fallback emergency account and system component recognition
- Display ordering of calling accounts
- Emergency number classification through an external authority
- Default dialer and in-call component selection
"""

from .emergency_account import (
    get_default_emergency_account, is_pstn_component_name,
    PSTN_COMPONENT_NAME, TELEPHONY_PACKAGE_NAME, PSTN_CALL_SERVICE_CLASS_NAME
)
from .account_ranker import compare_accounts, sort_sim_accounts, rank_accounts
from .ext_telephony import (
    ExtTelephonyService, HttpExtTelephonyClient, RemoteServiceError,
    EXT_TELEPHONY_SERVICE_NAME
)
from .emergency_classifier import (
    EmergencyNumberClassifier, RemoteEmergencyClassifier,
    UnavailableEmergencyClassifier, create_emergency_classifier,
    is_local_emergency_number, is_potential_local_emergency_number,
    should_process_as_emergency
)
from .component_resolver import (
    ComponentDiscovery, ComponentResolver, get_dialer_component_name,
    get_in_call_component_name, DIAL_CAPABILITY, IN_CALL_SERVICE_CAPABILITY
)

__all__ = [
    'get_default_emergency_account', 'is_pstn_component_name',
    'PSTN_COMPONENT_NAME', 'TELEPHONY_PACKAGE_NAME', 'PSTN_CALL_SERVICE_CLASS_NAME',
    'compare_accounts', 'sort_sim_accounts', 'rank_accounts',
    'ExtTelephonyService', 'HttpExtTelephonyClient', 'RemoteServiceError',
    'EXT_TELEPHONY_SERVICE_NAME',
    'EmergencyNumberClassifier', 'RemoteEmergencyClassifier',
    'UnavailableEmergencyClassifier', 'create_emergency_classifier',
    'is_local_emergency_number', 'is_potential_local_emergency_number',
    'should_process_as_emergency',
    'ComponentDiscovery', 'ComponentResolver', 'get_dialer_component_name',
    'get_in_call_component_name', 'DIAL_CAPABILITY', 'IN_CALL_SERVICE_CAPABILITY'
]
