"""
Global pytest configuration and fixtures for callroute testing.
"""
import sys
import tempfile
import pytest
from pathlib import Path

# Make the project root and the src layout importable without installing
ROOT_DIR = Path(__file__).parent.parent
for path in (ROOT_DIR, ROOT_DIR / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from callroute.core.config import ConfigurationManager
from callroute.core.service_registry import ServiceRegistry
from tests.mocks.external_service_mocks import MockExtTelephonyService


CALLROUTE_ENV_VARS = (
    "CALLROUTE_LOG_LEVEL",
    "CALLROUTE_CLASSIFIER_ENABLED",
    "CALLROUTE_CLASSIFIER_URL",
    "CALLROUTE_CLASSIFIER_TIMEOUT",
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CALLROUTE_* variables so the host environment cannot leak in."""
    for var in CALLROUTE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def config_manager(temp_dir, clean_env):
    """Configuration manager loaded from an empty config directory."""
    manager = ConfigurationManager(config_dir=str(temp_dir))
    manager.load_config()
    return manager


@pytest.fixture
def service_registry():
    """Fresh service registry."""
    return ServiceRegistry()


@pytest.fixture
def ext_telephony():
    """Fake classification authority that knows 911 and 112."""
    return MockExtTelephonyService(
        local_numbers={"911", "112"},
        potential_prefixes={"911", "112", "999"}
    )
