# -*- coding: utf-8 -*-
"""
Unit tests for integrator settings
"""

import os

import pytest
from pydantic import ValidationError

from ditaplugins.core.utils.config import Config
from ditaplugins.core.utils import settings as settings_module
from ditaplugins.core.utils.settings import IntegratorSettings, LogLevel
from ditaplugins.core.models.values import FeatureElement
from ditaplugins.features.registry import Features


@pytest.mark.unit
class TestIntegratorSettings:
    """Test IntegratorSettings"""

    def test_defaults(self, settings):
        """Test defaults match the reserved literals"""
        assert settings.feature_value_separator == ','
        assert settings.feature_type_file == 'file'
        assert settings.required_importance == 'required'
        assert settings.import_feature_id == 'ant.import'
        assert settings.log_level is LogLevel.INFO

    def test_plugin_dir_variable(self, settings):
        assert settings.plugin_dir_variable('foo') == '${dita.plugin.foo.dir}'

    def test_environment_override(self, monkeypatch):
        """Test DITAPLUGINS_* variables override defaults"""
        monkeypatch.setenv('DITAPLUGINS_FEATURE_VALUE_SEPARATOR', ';')
        monkeypatch.setenv('DITAPLUGINS_LOG_LEVEL', 'debug')

        settings = IntegratorSettings(_env_file=None)

        assert settings.feature_value_separator == ';'
        assert settings.log_level is LogLevel.DEBUG

    def test_empty_separator_rejected(self):
        with pytest.raises(ValidationError):
            IntegratorSettings(_env_file=None, feature_value_separator='')

    def test_blank_import_feature_rejected(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            IntegratorSettings(_env_file=None, import_feature_id='  ')

    def test_property_template_requires_placeholder(self):
        with pytest.raises(ValidationError, match="must contain"):
            IntegratorSettings(_env_file=None, plugin_dir_property='dita.plugin.dir')

    def test_frozen(self, settings):
        """Test settings cannot be modified after creation"""
        with pytest.raises(ValidationError):
            settings.feature_value_separator = ';'

    def test_from_config(self, sample_config_dict):
        """Test building settings from a Config"""
        config = Config.from_dict(sample_config_dict)
        settings = IntegratorSettings.from_config(config)

        assert settings.feature_value_separator == ';'
        assert settings.required_importance == 'required'
        assert settings.log_level is LogLevel.DEBUG

    def test_singleton(self):
        """Test get_settings caches and reload_settings replaces"""
        first = settings_module.get_settings()
        assert settings_module.get_settings() is first

        reloaded = settings_module.reload_settings()
        assert reloaded is not first
        assert settings_module.get_settings() is reloaded

    def test_critical_log_level(self, monkeypatch):
        """Test CRITICAL is accepted from the environment and from Config"""
        monkeypatch.setenv('DITAPLUGINS_LOG_LEVEL', 'critical')
        assert IntegratorSettings(_env_file=None).log_level is LogLevel.CRITICAL

        config = Config.from_dict({'logging': {'level': 'CRITICAL'}})
        assert IntegratorSettings.from_config(config).log_level is LogLevel.CRITICAL

    def test_critical_log_level_does_not_block_registry(self, monkeypatch):
        """Test a registry built from global settings accepts CRITICAL"""
        monkeypatch.setenv('DITAPLUGINS_LOG_LEVEL', 'CRITICAL')
        settings_module.reload_settings()
        try:
            registry = Features('/opt/plugins/foo', '/opt/dita-ot')
            assert registry.settings.log_level is LogLevel.CRITICAL
        finally:
            monkeypatch.delenv('DITAPLUGINS_LOG_LEVEL')
            settings_module.reload_settings()

    @pytest.mark.parametrize('template', [
        'dita.{id}.dir.{kind}',
        'dita.{}.{id}.dir',
        'dita.{0}.{id}.dir',
        'dita.{id.upper}.dir',
        'dita.{id',
    ])
    def test_property_template_extra_fields_rejected(self, template):
        """Test only the '{id}' placeholder is allowed"""
        with pytest.raises(ValidationError):
            IntegratorSettings(_env_file=None, plugin_dir_property=template)

    def test_property_template_escaped_braces(self):
        """Test escaped braces are literal text"""
        custom = IntegratorSettings(_env_file=None, plugin_dir_property='dita.{{x}}.{id}.dir')
        registry = Features('/opt/plugins/foo', '/opt/dita-ot', settings=custom)
        registry.set_plugin_id('foo')
        registry.add_feature('ant.import', FeatureElement(file='a.xml'))

        assert registry.get_feature('ant.import') == ('${dita.{x}.foo.dir}' + os.sep + 'a.xml',)

    @pytest.mark.parametrize('field', ['feature_type_file', 'required_importance'])
    def test_empty_literals_rejected(self, monkeypatch, field):
        """Test empty file marker and importance literals are rejected"""
        monkeypatch.setenv(f'DITAPLUGINS_{field.upper()}', '')

        with pytest.raises(ValidationError):
            IntegratorSettings(_env_file=None)
