"""
jshell Core Module

Core shell services:
- Configuration Loader
- Console error reporting
"""

from .config_loader import (
    ConfigLoader,
    Config,
    ShellConfig,
    LoggingConfig,
    get_config,
)
from .console import report_error

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'ShellConfig',
    'LoggingConfig',
    'get_config',
    # Console
    'report_error',
]
