"""
Utility functions and helpers.
"""
from .logging_config import LoggerManager, logger, setup_logging
from .resource_loader import get_app_data_dir, get_config_dir, get_log_dir

__all__ = [
    # Directories
    'get_app_data_dir',
    'get_config_dir',
    'get_log_dir',

    # Logging
    'logger',
    'setup_logging',
    'LoggerManager',
]
