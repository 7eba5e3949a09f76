# -*- coding: utf-8 -*-
"""
Configuration management for the plugin integrator
Supports YAML, dict, and programmatic configuration
"""

from typing import Dict, Any, Optional, Union
from pathlib import Path
import copy

import yaml

from ...constants import (
    ANT_IMPORT_FEATURE,
    FEAT_VALUE_SEPARATOR,
    FEATURE_TYPE_VALUE_FILE,
    PLUGIN_DIR_PROPERTY,
    REQUIRE_IMPORTANCE_VALUE_REQUIRED,
)

_MISSING = object()


class Config:
    """Configuration manager with dot-notation access and built-in defaults

    Example:
        >>> config = Config.from_dict({'integrator': {'feature_value_separator': ';'}})
        >>> config.get('integrator.feature_value_separator')
        ';'
        >>> config.get('integrator.import_feature_id')
        'ant.import'
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        self._config = config_dict or {}
        self._defaults = self._get_defaults()

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'Config':
        """Load configuration from YAML file

        Args:
            yaml_path: Path to YAML config file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If the file does not exist
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f)

        return cls(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        return cls(copy.deepcopy(config_dict))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation

        Explicit values win over built-in defaults; ``default`` is returned
        only when neither has the key.

        Args:
            key: Configuration key, e.g. 'integrator.feature_value_separator'
            default: Value returned if the key is not found

        Returns:
            Configuration value
        """
        value = self._lookup(self._config, key)
        if value is _MISSING:
            value = self._lookup(self._defaults, key)
        return default if value is _MISSING else value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation"""
        *parents, last = key.split('.')
        target = self._config

        for k in parents:
            target = target.setdefault(k, {})

        target[last] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Deep-merge a dictionary into the configuration"""
        self._deep_update(self._config, config_dict)

    def section(self, name: str) -> Dict[str, Any]:
        """Return a section merged over its defaults

        Args:
            name: Top-level section name, e.g. 'integrator'

        Returns:
            Merged section dictionary
        """
        merged = copy.deepcopy(self._defaults.get(name, {}))
        self._deep_update(merged, copy.deepcopy(self._config.get(name) or {}))
        return merged

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def save(self, yaml_path: Union[str, Path]) -> None:
        """Save configuration to YAML file

        Args:
            yaml_path: Path to save YAML file
        """
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self._config, f, default_flow_style=False, allow_unicode=True)

    @staticmethod
    def _lookup(source: Dict[str, Any], key: str) -> Any:
        value: Any = source
        for k in key.split('.'):
            if not isinstance(value, dict) or k not in value:
                return _MISSING
            value = value[k]
        return value

    @staticmethod
    def _deep_update(target: dict, source: dict) -> None:
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                Config._deep_update(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _get_defaults() -> Dict[str, Any]:
        """Get default configuration values"""
        return {
            'integrator': {
                'feature_value_separator': FEAT_VALUE_SEPARATOR,
                'feature_type_file': FEATURE_TYPE_VALUE_FILE,
                'required_importance': REQUIRE_IMPORTANCE_VALUE_REQUIRED,
                'import_feature_id': ANT_IMPORT_FEATURE,
                'plugin_dir_property': PLUGIN_DIR_PROPERTY,
            },
            'logging': {
                'level': 'INFO',
                'file': None,
            },
        }

    def __repr__(self) -> str:
        return f"Config({self._config})"
