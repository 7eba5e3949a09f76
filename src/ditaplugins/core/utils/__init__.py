# -*- coding: utf-8 -*-
"""
Core utilities
"""

from .config import Config
from .logger import setup_logger, setup_logger_from_config, setup_logger_from_settings
from .settings import IntegratorSettings, get_settings, reload_settings

__all__ = [
    'Config',
    'setup_logger',
    'setup_logger_from_config',
    'setup_logger_from_settings',
    'IntegratorSettings',
    'get_settings',
    'reload_settings',
]
