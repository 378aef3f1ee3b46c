"""
Extended Telephony Service Interface

Remote interface of the emergency number classification authority and
its HTTP transport. Calls are blocking round trips; any transport-level
problem surfaces as RemoteServiceError.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from ...core.logging import get_logger


EXT_TELEPHONY_SERVICE_NAME = "extphone"


class RemoteServiceError(Exception):
    """Transport-level failure talking to a remote service"""
    pass


class ExtTelephonyService(ABC):
    """Emergency number classification authority"""

    @abstractmethod
    def is_local_emergency_number(self, address: str) -> bool:
        """
        Check whether an address is an emergency number in the current locale

        Raises:
            RemoteServiceError: If the authority cannot be reached
        """
        pass

    @abstractmethod
    def is_potential_local_emergency_number(self, address: str) -> bool:
        """
        Check whether an address could be dialed as an emergency number

        Raises:
            RemoteServiceError: If the authority cannot be reached
        """
        pass


class HttpExtTelephonyClient(ExtTelephonyService):
    """
    HTTP client for a classification authority exposed over REST.

    POST {base_url}/emergency/local and {base_url}/emergency/potential
    with {"address": ...}; the authority answers {"result": true|false}.
    """

    LOCAL_PATH = "/emergency/local"
    POTENTIAL_PATH = "/emergency/potential"

    def __init__(self, base_url: str, timeout: float = 5,
                 session: Optional[requests.Session] = None):
        """
        Initialize HTTP client.

        Args:
            base_url: Root URL of the authority
            timeout: Request timeout in seconds
            session: Optional requests session to reuse connections
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session
        self.logger = get_logger('ext_telephony')

    def is_local_emergency_number(self, address: str) -> bool:
        return self._classify(self.LOCAL_PATH, address)

    def is_potential_local_emergency_number(self, address: str) -> bool:
        return self._classify(self.POTENTIAL_PATH, address)

    def _post(self, url: str, payload: Dict[str, Any]) -> requests.Response:
        if self.session is not None:
            return self.session.post(url, json=payload, timeout=self.timeout)
        return requests.post(url, json=payload, timeout=self.timeout)

    def _classify(self, path: str, address: str) -> bool:
        url = f"{self.base_url}{path}"

        try:
            response = self._post(url, {"address": address})
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise RemoteServiceError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise RemoteServiceError(f"Invalid JSON from {url}: {e}") from e

        result = body.get('result') if isinstance(body, dict) else None
        if not isinstance(result, bool):
            raise RemoteServiceError(f"Malformed response from {url}: {body!r}")

        self.logger.debug(f"{path} answered {result}")
        return result
