# -*- coding: utf-8 -*-
"""Integrator settings using Pydantic Settings.

The reserved literals of the integration pipeline are exposed as settings so
every stage (feature registry, build script generation) reads the same
values. Defaults come from ``ditaplugins.constants`` and can be overridden
through ``DITAPLUGINS_*`` environment variables or a Config file.
"""

from enum import Enum
from string import Formatter
from typing import Optional, TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...constants import (
    ANT_IMPORT_FEATURE,
    FEAT_VALUE_SEPARATOR,
    FEATURE_TYPE_VALUE_FILE,
    PLUGIN_DIR_PROPERTY,
    REQUIRE_IMPORTANCE_VALUE_REQUIRED,
)

if TYPE_CHECKING:
    from .config import Config


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class IntegratorSettings(BaseSettings):
    """Literals shared by the plugin integration pipeline."""

    feature_value_separator: str = Field(
        default=FEAT_VALUE_SEPARATOR,
        description="Separator between values of a feature attribute",
        min_length=1,
    )
    feature_type_file: str = Field(
        default=FEATURE_TYPE_VALUE_FILE,
        description="Feature type attribute value marking file features",
        min_length=1,
    )
    required_importance: str = Field(
        default=REQUIRE_IMPORTANCE_VALUE_REQUIRED,
        description="Requirement importance value meaning 'required'",
        min_length=1,
    )
    import_feature_id: str = Field(
        default=ANT_IMPORT_FEATURE,
        description="Feature whose relative files are kept as build property references",
    )
    plugin_dir_property: str = Field(
        default=PLUGIN_DIR_PROPERTY,
        description="Build property name of a plugin directory, '{id}' is the plugin id",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="DITAPLUGINS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("import_feature_id")
    @classmethod
    def validate_import_feature_id(cls, v: str) -> str:
        """Reject a blank import feature id."""
        if not v.strip():
            raise ValueError("import_feature_id must not be blank")
        return v

    @field_validator("plugin_dir_property")
    @classmethod
    def validate_plugin_dir_property(cls, v: str) -> str:
        """Require the plugin id placeholder and allow no other field."""
        fields = [name for _, name, _, _ in Formatter().parse(v) if name is not None]
        if "id" not in fields:
            raise ValueError("plugin_dir_property must contain '{id}'")
        unknown = sorted(set(fields) - {"id"})
        if unknown:
            raise ValueError(f"plugin_dir_property has unknown fields: {unknown}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @classmethod
    def from_config(cls, config: "Config") -> "IntegratorSettings":
        """Create settings from the ``integrator`` and ``logging`` config sections.

        Args:
            config: Config instance

        Returns:
            IntegratorSettings instance
        """
        return cls(
            **config.section("integrator"),
            log_level=config.get("logging.level", LogLevel.INFO.value),
        )

    def plugin_dir_variable(self, plugin_id: Optional[str]) -> str:
        """Variable reference to a plugin directory, e.g. ``${dita.plugin.foo.dir}``."""
        return "${" + self.plugin_dir_property.format(id=plugin_id) + "}"


# Global settings instance
_settings: Optional[IntegratorSettings] = None


def get_settings() -> IntegratorSettings:
    """Get integrator settings singleton.

    Returns:
        IntegratorSettings instance
    """
    global _settings
    if _settings is None:
        _settings = IntegratorSettings()
    return _settings


def reload_settings() -> IntegratorSettings:
    """Reload settings (useful for testing).

    Returns:
        New IntegratorSettings instance
    """
    global _settings
    _settings = IntegratorSettings()
    return _settings
