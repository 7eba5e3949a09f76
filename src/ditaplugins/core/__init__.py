# -*- coding: utf-8 -*-
"""
ditaplugins core: configuration, logging and value objects
"""

from .utils.config import Config
from .utils.logger import setup_logger
from .utils.settings import IntegratorSettings

__all__ = [
    'Config',
    'setup_logger',
    'IntegratorSettings',
]
