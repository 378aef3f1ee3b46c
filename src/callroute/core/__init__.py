"""
Core module for callroute

Contains configuration management, logging setup and the
name-based service registry.
"""

from .config import ConfigurationManager, ConfigurationError, get_config_manager
from .logging import initialize_logging, get_logger, get_structured_logger
from .service_registry import ServiceRegistry, get_service_registry

__all__ = [
    'ConfigurationManager',
    'ConfigurationError',
    'get_config_manager',
    'initialize_logging',
    'get_logger',
    'get_structured_logger',
    'ServiceRegistry',
    'get_service_registry'
]
