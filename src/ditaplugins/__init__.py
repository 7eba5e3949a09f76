# -*- coding: utf-8 -*-
"""
ditaplugins - Feature registry for DITA Open Toolkit plugin integration
"""

__version__ = '0.1.0'

# Core modules
from .core.utils.config import Config
from .core.utils.logger import setup_logger, setup_logger_from_config, setup_logger_from_settings
from .core.utils.settings import IntegratorSettings, get_settings, reload_settings

# Value objects
from .core.models import (
    ExtensionPoint,
    PluginRequirement,
    FeatureKind,
    ResolvedPath,
    DeferredVariableReference,
    FeatureElement,
    TemplateValue,
)

# Registry
from .features.registry import Features

__all__ = [
    # Version
    '__version__',

    # Core utilities
    'Config',
    'setup_logger',
    'setup_logger_from_config',
    'setup_logger_from_settings',
    'IntegratorSettings',
    'get_settings',
    'reload_settings',

    # Value objects
    'ExtensionPoint',
    'PluginRequirement',
    'FeatureKind',
    'ResolvedPath',
    'DeferredVariableReference',
    'FeatureElement',
    'TemplateValue',

    # Registry
    'Features',
]
