# -*- coding: utf-8 -*-
"""
Value objects exchanged with the plugin integrator
"""

from .extension_point import ExtensionPoint
from .requirement import PluginRequirement
from .values import (
    FeatureKind,
    ResolvedPath,
    DeferredVariableReference,
    FeatureElement,
    TemplateValue,
)

__all__ = [
    'ExtensionPoint',
    'PluginRequirement',
    'FeatureKind',
    'ResolvedPath',
    'DeferredVariableReference',
    'FeatureElement',
    'TemplateValue',
]
