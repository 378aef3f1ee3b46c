"""
Unit tests for the Configuration Manager
"""

from pathlib import Path

import pytest
import yaml

from callroute.core.config import ConfigurationError, ConfigurationManager


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))


class TestConfigurationLoading:
    """Test layered configuration loading"""

    def test_builtin_defaults(self, config_manager):
        assert config_manager.is_emergency_classifier_enabled() is True
        assert config_manager.get_emergency_service_name() == "extphone"
        assert config_manager.get_emergency_service_url() is None
        assert config_manager.get_emergency_service_timeout() == 5
        assert config_manager.get('logging.level') == "INFO"
        assert len(config_manager.get_dialer_default_classes()) == 2
        assert len(config_manager.get_incall_default_classes()) == 2

    def test_local_config_overrides_default_file(self, temp_dir, clean_env):
        write_yaml(temp_dir / "default.yaml", {
            "telephony": {"emergency_classifier": {"timeout": 10, "service_name": "qti.extphone"}}
        })
        write_yaml(temp_dir / "config.yaml", {
            "telephony": {"emergency_classifier": {"timeout": 2}}
        })

        manager = ConfigurationManager(config_dir=str(temp_dir))
        manager.load_config()

        assert manager.get_emergency_service_timeout() == 2
        assert manager.get_emergency_service_name() == "qti.extphone"
        # Untouched defaults survive the deep merge
        assert manager.is_emergency_classifier_enabled() is True

    def test_environment_overrides_files(self, temp_dir, clean_env):
        write_yaml(temp_dir / "config.yaml", {
            "telephony": {"emergency_classifier": {"enabled": True}}
        })
        clean_env.setenv("CALLROUTE_CLASSIFIER_ENABLED", "false")
        clean_env.setenv("CALLROUTE_CLASSIFIER_URL", "http://authority.local")
        clean_env.setenv("CALLROUTE_CLASSIFIER_TIMEOUT", "2.5")
        clean_env.setenv("CALLROUTE_LOG_LEVEL", "DEBUG")

        manager = ConfigurationManager(config_dir=str(temp_dir))
        manager.load_config()

        assert manager.is_emergency_classifier_enabled() is False
        assert manager.get_emergency_service_url() == "http://authority.local"
        assert manager.get_emergency_service_timeout() == 2.5
        assert manager.get('logging.level') == "DEBUG"

    def test_malformed_yaml(self, temp_dir, clean_env):
        (temp_dir / "config.yaml").write_text("telephony: [unclosed")

        manager = ConfigurationManager(config_dir=str(temp_dir))

        with pytest.raises(ConfigurationError):
            manager.load_config()


class TestConfigurationValidation:
    """Test validation of loaded values"""

    @pytest.mark.parametrize("override", [
        {"logging": {"level": "LOUD"}},
        {"telephony": {"emergency_classifier": {"timeout": 0}}},
        {"telephony": {"emergency_classifier": {"timeout": "soon"}}},
        {"telephony": {"emergency_classifier": {"service_name": ""}}},
        {"telephony": {"emergency_classifier": {"base_url": 8080}}},
        {"telephony": {"components": {"dialer_default_classes": "com.android.dialer/.Dialer"}}},
        {"telephony": {"components": {"incall_default_classes": [1, 2]}}},
    ])
    def test_invalid_values_rejected(self, temp_dir, clean_env, override):
        write_yaml(temp_dir / "config.yaml", override)

        manager = ConfigurationManager(config_dir=str(temp_dir))

        with pytest.raises(ConfigurationError):
            manager.load_config()


class TestConfigurationAccess:
    """Test runtime access and updates"""

    def test_get_missing_key_returns_default(self, config_manager):
        assert config_manager.get('telephony.nothing.here', 'fallback') == 'fallback'

    def test_set_updates_value(self, config_manager):
        config_manager.set('telephony.emergency_classifier.enabled', False)

        assert config_manager.is_emergency_classifier_enabled() is False

    def test_set_creates_missing_sections(self, config_manager):
        config_manager.set('telephony.routing.prefer_sim', True)

        assert config_manager.get('telephony.routing') == {'prefer_sim': True}


class TestShippedConfiguration:
    """Test the configuration file shipped with the project"""

    def test_default_yaml_loads(self, clean_env):
        config_dir = Path(__file__).parent.parent.parent / "config"

        manager = ConfigurationManager(config_dir=str(config_dir))
        manager.load_config()

        assert manager.get_emergency_service_name() == "extphone"
        assert manager.get_emergency_service_url() is None
        assert manager.get('logging.file') == "logs/callroute.log"
        assert manager.get('logging.services.emergency_classifier') == "INFO"
