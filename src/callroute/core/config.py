"""
Configuration Management System for callroute

Handles loading configuration from environment variables, config files,
and provides validation and runtime updates.
"""

import os
import json
import yaml
import logging
from typing import Any, Dict, List, Optional, Callable
from pathlib import Path
from dataclasses import dataclass


@dataclass
class ConfigSource:
    """Configuration source definition"""
    name: str
    priority: int
    loader: Callable
    path: Optional[str] = None


class ConfigurationError(Exception):
    """Configuration-related errors"""
    pass


DEFAULT_DIALER_CLASSES = [
    "com.android.dialer/com.android.dialer.DialtactsActivity",
    "com.google.android.dialer/com.google.android.dialer.extensions.GoogleDialtactsActivity",
]

DEFAULT_INCALL_CLASSES = [
    "com.android.dialer/com.android.incallui.InCallServiceImpl",
    "com.google.android.dialer/com.android.incallui.InCallServiceImpl",
]


class ConfigurationManager:
    """
    Manages system configuration with support for multiple sources,
    validation, and runtime updates.
    """

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self.config: Dict[str, Any] = {}
        self.sources: List[ConfigSource] = []
        self.logger = logging.getLogger(__name__)

        # Default configuration values
        self.defaults = {
            "app": {
                "name": "callroute",
                "log_level": "INFO"
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "max_size": "10MB",
                "backup_count": 5,
                "console": True,
                "services": {}
            },
            "telephony": {
                "emergency_classifier": {
                    "enabled": True,
                    "service_name": "extphone",
                    "base_url": None,
                    "timeout": 5
                },
                "components": {
                    "dialer_default_classes": list(DEFAULT_DIALER_CLASSES),
                    "incall_default_classes": list(DEFAULT_INCALL_CLASSES)
                }
            }
        }

        self._setup_sources()

    def _setup_sources(self):
        """Set up configuration sources in priority order"""
        self.sources.append(ConfigSource(
            name="environment",
            priority=4,
            loader=self._load_from_env
        ))

        local_config_path = str(self.config_dir / "config.yaml")
        self.sources.append(ConfigSource(
            name="local_config",
            priority=3,
            loader=lambda: self._load_from_file(local_config_path),
            path=local_config_path
        ))

        default_config_path = str(self.config_dir / "default.yaml")
        self.sources.append(ConfigSource(
            name="default_config",
            priority=2,
            loader=lambda: self._load_from_file(default_config_path),
            path=default_config_path
        ))

        self.sources.append(ConfigSource(
            name="defaults",
            priority=1,
            loader=lambda: self.defaults
        ))

    def load_config(self) -> None:
        """Load configuration from all sources"""
        self.logger.info("Loading configuration from all sources")

        merged_config = {}

        # Lowest priority first so later sources override
        for source in sorted(self.sources, key=lambda x: x.priority):
            source_config = source.loader()
            if source_config:
                merged_config = self._deep_merge(merged_config, source_config)
                self.logger.debug(f"Loaded configuration from {source.name}")

        self.config = merged_config
        self._validate_config()
        self.logger.info("Configuration loaded successfully")

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}

        env_mappings = {
            "CALLROUTE_LOG_LEVEL": "logging.level",
            "CALLROUTE_CLASSIFIER_ENABLED": "telephony.emergency_classifier.enabled",
            "CALLROUTE_CLASSIFIER_URL": "telephony.emergency_classifier.base_url",
            "CALLROUTE_CLASSIFIER_TIMEOUT": "telephony.emergency_classifier.timeout"
        }

        for env_var, config_key in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                if value.lower() in ('true', 'false'):
                    value = value.lower() == 'true'
                elif value.isdigit():
                    value = int(value)
                elif config_key.endswith('.timeout'):
                    try:
                        value = float(value)
                    except ValueError:
                        self.logger.warning(f"Invalid number in {env_var}: {value}")
                        continue

                self._set_nested_value(config, config_key, value)

        return config

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        """Load configuration from YAML or JSON file"""
        path = Path(file_path)

        if not path.exists():
            return {}

        try:
            with open(path, 'r') as f:
                if path.suffix.lower() in ['.yaml', '.yml']:
                    return yaml.safe_load(f) or {}
                elif path.suffix.lower() == '.json':
                    return json.load(f)
                else:
                    self.logger.warning(f"Unsupported config file format: {path}")
                    return {}
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Error loading config file {path}: {e}")

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _set_nested_value(self, config: Dict, key_path: str, value: Any) -> None:
        """Set a nested configuration value using dot notation"""
        keys = key_path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current or not isinstance(current[key], dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def _validate_config(self) -> None:
        """Validate configuration values"""
        errors = []

        for section in ['logging', 'telephony']:
            if section not in self.config:
                errors.append(f"Missing required configuration section: {section}")

        log_level = self.get('logging.level', 'INFO')
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if not isinstance(log_level, str) or log_level.upper() not in valid_levels:
            errors.append(f"Invalid log level: {log_level}")

        service_name = self.get('telephony.emergency_classifier.service_name')
        if not isinstance(service_name, str) or not service_name.strip():
            errors.append(f"Invalid emergency classifier service name: {service_name!r}")

        timeout = self.get('telephony.emergency_classifier.timeout')
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            errors.append(f"Invalid emergency classifier timeout: {timeout!r}")

        base_url = self.get('telephony.emergency_classifier.base_url')
        if base_url is not None and not isinstance(base_url, str):
            errors.append(f"Invalid emergency classifier base URL: {base_url!r}")

        for key in ['dialer_default_classes', 'incall_default_classes']:
            entries = self.get(f'telephony.components.{key}', [])
            if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
                errors.append(f"telephony.components.{key} must be a list of strings")

        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        keys = key.split('.')
        current = self.config

        try:
            for k in keys:
                current = current[k]
            return current
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation"""
        self._set_nested_value(self.config, key, value)

    def is_emergency_classifier_enabled(self) -> bool:
        return bool(self.get('telephony.emergency_classifier.enabled', True))

    def get_emergency_service_name(self) -> str:
        return self.get('telephony.emergency_classifier.service_name', 'extphone')

    def get_emergency_service_url(self) -> Optional[str]:
        return self.get('telephony.emergency_classifier.base_url')

    def get_emergency_service_timeout(self) -> float:
        return self.get('telephony.emergency_classifier.timeout', 5)

    def get_dialer_default_classes(self) -> List[str]:
        """Allow-list of flattened dialer component names, in preference order"""
        return self.get('telephony.components.dialer_default_classes', [])

    def get_incall_default_classes(self) -> List[str]:
        """Allow-list of flattened in-call service component names"""
        return self.get('telephony.components.incall_default_classes', [])


# Global configuration manager instance
_config_manager: Optional[ConfigurationManager] = None


def get_config_manager(config_dir: str = "config") -> ConfigurationManager:
    """Get the global configuration manager, loading it on first use"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigurationManager(config_dir)
        _config_manager.load_config()
    return _config_manager
