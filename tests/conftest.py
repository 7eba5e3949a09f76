# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures
"""

import os

import pytest

from ditaplugins.core.utils.settings import IntegratorSettings
from ditaplugins.features.registry import Features


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove integrator overrides from the environment"""
    for key in list(os.environ):
        if key.upper().startswith('DITAPLUGINS_'):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary"""
    return {
        'integrator': {
            'feature_value_separator': ';',
            'import_feature_id': 'ant.import',
        },
        'logging': {
            'level': 'DEBUG',
        }
    }


@pytest.fixture
def settings():
    """Default integrator settings, ignoring any .env file"""
    return IntegratorSettings(_env_file=None)


@pytest.fixture
def plugin_dir():
    """Absolute plugin directory in platform form"""
    return os.sep + os.sep.join(['opt', 'plugins', 'foo'])


@pytest.fixture
def dita_dir():
    """Absolute toolkit directory in platform form"""
    return os.sep + os.sep.join(['opt', 'dita-ot'])


@pytest.fixture
def features(plugin_dir, dita_dir, settings):
    """Registry of plugin 'foo'"""
    registry = Features(plugin_dir, dita_dir, settings=settings)
    registry.set_plugin_id('foo')
    return registry
