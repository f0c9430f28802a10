"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, setup_logger_from_config, get_log_level, set_global_level
from .config_loader import ConfigLoader
from .error_handler import ErrorHandler, global_error_handler
from .scheduling import create_scheduler, cancel_event
from .exceptions import (
    GameException,
    ValidationError,
    DeviceException,
    SensorUnavailable,
    PermissionDenied,
    SettingsException,
    ConfigurationException
)

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_log_level',
    'set_global_level',
    'ConfigLoader',
    'ErrorHandler',
    'global_error_handler',
    'create_scheduler',
    'cancel_event',
    'GameException',
    'ValidationError',
    'DeviceException',
    'SensorUnavailable',
    'PermissionDenied',
    'SettingsException',
    'ConfigurationException'
]
