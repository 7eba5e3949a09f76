# -*- coding: utf-8 -*-
"""
Plugin Feature Registry

Collects the declarations of one plugin (features, extension points,
requirements, metadata and templates) for the integrator, which later
merges every plugin's registry into the toolkit configuration.
"""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..constants import FEATURE_FILE_ATTR, FEATURE_TYPE_ATTR, FEATURE_VALUE_ATTR
from ..core.models.extension_point import ExtensionPoint
from ..core.models.requirement import PluginRequirement
from ..core.models.values import FeatureKind
from ..core.utils.settings import IntegratorSettings, get_settings
from .paths import is_absolute_path, resolve_file_token, tokenize

logger = logging.getLogger('ditaplugins')

PathLike = Union[str, Path]


class Features:
    """Feature registry of a single plugin

    Declarations accumulate monotonically; readers get read-only views.

    Example:
        >>> from ditaplugins import FeatureElement
        >>> features = Features('/opt/plugins/foo', '/opt/dita-ot')
        >>> features.set_plugin_id('foo')
        >>> features.add_feature('ant.import', FeatureElement(file='a.xml,b.xml'))
        >>> features.get_feature('ant.import')
        ('${dita.plugin.foo.dir}/a.xml', '${dita.plugin.foo.dir}/b.xml')
    """

    def __init__(
        self,
        plugin_dir: PathLike,
        dita_dir: PathLike,
        settings: Optional[IntegratorSettings] = None
    ):
        """Initialize an empty registry

        Args:
            plugin_dir: Absolute plugin directory
            dita_dir: Toolkit base directory
            settings: Integrator literals, global settings if omitted
        """
        self._id: Optional[str] = None
        self._plugin_dir = plugin_dir
        self._dita_dir = dita_dir
        self._settings = settings if settings is not None else get_settings()
        self._extension_points: Dict[str, ExtensionPoint] = {}
        self._features: Dict[str, Tuple[str, ...]] = {}
        self._feature_kinds: Dict[str, FeatureKind] = {}
        self._requirements: List[PluginRequirement] = []
        self._meta: Dict[str, str] = {}
        self._templates: List[Any] = []

    # Identity

    def get_plugin_dir(self) -> PathLike:
        return self._plugin_dir

    def get_dita_dir(self) -> PathLike:
        """Get toolkit base directory"""
        return self._dita_dir

    def set_plugin_id(self, plugin_id: str) -> None:
        self._id = plugin_id

    def get_plugin_id(self) -> Optional[str]:
        return self._id

    plugin_dir = property(get_plugin_dir)
    dita_dir = property(get_dita_dir)
    plugin_id = property(get_plugin_id, set_plugin_id)

    @property
    def settings(self) -> IntegratorSettings:
        return self._settings

    # Extension points

    def add_extension_point(self, extension_point: ExtensionPoint) -> None:
        self._extension_points[extension_point.id] = extension_point

    def get_extension_points(self) -> Mapping[str, ExtensionPoint]:
        return MappingProxyType(self._extension_points)

    # Features

    def add_feature(self, feature_id: str, elem: Any) -> None:
        """Add feature values to the feature table

        A non-empty ``file`` attribute always declares file values;
        otherwise the ``value`` attribute is used and is file-valued only
        when ``type`` is the file marker. Relative files are resolved
        against the plugin directory, except for the import feature whose
        files become ``${dita.plugin.<id>.dir}`` references.

        Args:
            feature_id: Feature id
            elem: Feature element, anything with ``get(attribute_name)``
                such as FeatureElement, an ElementTree element or a dict
        """
        value = elem.get(FEATURE_FILE_ATTR) or ''
        if value:
            kind = FeatureKind.FILE
        else:
            value = elem.get(FEATURE_VALUE_ATTR) or ''
            is_file = (elem.get(FEATURE_TYPE_ATTR) or '') == self._settings.feature_type_file
            kind = FeatureKind.FILE if is_file else FeatureKind.PLAIN

        tokens = tokenize(value, self._settings.feature_value_separator)
        values = list(self._features.get(feature_id, ()))

        for token in tokens:
            if kind is FeatureKind.FILE:
                values.append(self._resolve(feature_id, token))
            else:
                values.append(token)

        self._features[feature_id] = tuple(values)
        self._feature_kinds[feature_id] = kind

        logger.debug(
            f"Plugin {self._id}: feature '{feature_id}' ({kind.value}) "
            f"added {len(tokens)} value(s)"
        )

    def _resolve(self, feature_id: str, token: str) -> str:
        if (
            self._id is None
            and feature_id == self._settings.import_feature_id
            and not is_absolute_path(token)
        ):
            logger.warning(
                f"Feature '{feature_id}' value '{token}' referenced before plugin id was set"
            )

        return resolve_file_token(
            feature_id,
            token,
            plugin_id=self._id,
            plugin_dir=self._plugin_dir,
            import_feature_id=self._settings.import_feature_id,
            property_template=self._settings.plugin_dir_property,
            sep=os.sep,
        )

    def get_feature(self, feature_id: str) -> Tuple[str, ...]:
        """Return the values of a feature

        Args:
            feature_id: Feature id

        Returns:
            Values in declaration order, empty if never declared
        """
        return self._features.get(feature_id, ())

    def get_feature_kind(self, feature_id: str) -> Optional[FeatureKind]:
        return self._feature_kinds.get(feature_id)

    def get_all_features(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(self._features)

    # Requirements

    def add_require(self, plugin_id: str, importance: Optional[str] = None) -> None:
        """Add a required plugin

        Args:
            plugin_id: Required plugin id, alternatives separated by '|'
            importance: 'required' or another value for optional;
                None keeps the requirement's default (required)
        """
        requirement = PluginRequirement()
        requirement.add_plugins(plugin_id)
        if importance is not None:
            requirement.set_required(importance == self._settings.required_importance)
        self._requirements.append(requirement)

    def get_require_list_iter(self) -> Iterator[PluginRequirement]:
        return iter(list(self._requirements))

    # Metadata

    def add_meta(self, meta_type: str, value: str) -> None:
        """Add meta info, replacing any previous value of the type

        Raises:
            ValueError: If value is None
        """
        if value is None:
            raise ValueError(f"Meta value for '{meta_type}' cannot be None")
        self._meta[meta_type] = value

    def get_meta(self, meta_type: str) -> Optional[str]:
        return self._meta.get(meta_type)

    # Templates

    def add_template(self, template: Any) -> None:
        self._templates.append(template)

    def get_all_templates(self) -> Tuple[Any, ...]:
        return tuple(self._templates)

    # Export

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot of the registry

        Returns:
            Dictionary with lists and strings only, except template entries
        """
        return {
            'plugin_id': self._id,
            'plugin_dir': str(self._plugin_dir),
            'dita_dir': str(self._dita_dir),
            'extension_points': sorted(self._extension_points),
            'features': {k: [str(v) for v in values] for k, values in self._features.items()},
            'requirements': [
                {'plugins': list(req.plugins), 'required': req.required}
                for req in self._requirements
            ],
            'meta': dict(self._meta),
            'templates': list(self._templates),
        }

    def summary(self) -> str:
        """Get a human-readable summary of the registry"""
        lines = [
            "=" * 60,
            f"Plugin: {self._id}",
            "=" * 60,
            f"Directory: {self._plugin_dir}",
        ]

        if self._extension_points:
            lines.extend(["", "Extension points:"])
            for point_id in sorted(self._extension_points):
                lines.append(f"  {point_id}")

        if self._features:
            lines.extend(["", "Features:"])
            for feature_id, values in self._features.items():
                lines.append(f"  {feature_id}: {', '.join(values)}")

        if self._requirements:
            lines.extend(["", "Requires:"])
            for req in self._requirements:
                flag = '' if req.required else ' (optional)'
                lines.append(f"  {req}{flag}")

        lines.append("=" * 60)

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Features(plugin_id={self._id!r}, plugin_dir={str(self._plugin_dir)!r}, "
            f"features={len(self._features)})"
        )
