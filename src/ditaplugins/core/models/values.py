# -*- coding: utf-8 -*-
"""
Feature value types

File-valued features resolve to one of two path forms:

- ResolvedPath: a plugin-local file, resolved immediately against the
  plugin directory
- DeferredVariableReference: a file referenced through the
  ``${dita.plugin.<id>.dir}`` build property, resolved only once the whole
  plugin set is known

Both are ``str`` subclasses so they can be used wherever a plain feature
value is expected while staying distinguishable by type.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union
from pathlib import Path

from ...constants import (
    FEATURE_FILE_ATTR,
    FEATURE_TYPE_ATTR,
    FEATURE_VALUE_ATTR,
    PLUGIN_DIR_PROPERTY,
)


class FeatureKind(str, Enum):
    """How the values of a feature are interpreted"""

    PLAIN = 'plain'
    FILE = 'file'


class ResolvedPath(str):
    """Path resolved against a known base directory"""

    def __new__(
        cls,
        base_dir: Union[str, Path],
        fragment: str,
        sep: str = os.sep
    ) -> 'ResolvedPath':
        obj = super().__new__(cls, f"{base_dir}{sep}{fragment}")
        obj.base_dir = str(base_dir)
        obj.fragment = fragment
        obj.sep = sep
        return obj

    def __getnewargs__(self):
        return (self.base_dir, self.fragment, self.sep)


class DeferredVariableReference(str):
    """Path relative to a plugin directory build property

    Example:
        >>> ref = DeferredVariableReference('foo', 'build.xml', sep='/')
        >>> str(ref)
        '${dita.plugin.foo.dir}/build.xml'
        >>> ref.resolve({'foo': '/opt/plugins/foo'})
        '/opt/plugins/foo/build.xml'
    """

    def __new__(
        cls,
        plugin_id: Optional[str],
        fragment: str,
        sep: str = os.sep,
        property_template: str = PLUGIN_DIR_PROPERTY
    ) -> 'DeferredVariableReference':
        variable = property_template.format(id=plugin_id)
        obj = super().__new__(cls, f"${{{variable}}}{sep}{fragment}")
        obj.plugin_id = plugin_id
        obj.fragment = fragment
        obj.sep = sep
        obj.property_template = property_template
        return obj

    def __getnewargs__(self):
        return (self.plugin_id, self.fragment, self.sep, self.property_template)

    @property
    def variable(self) -> str:
        """Name of the build property the reference depends on"""
        return self.property_template.format(id=self.plugin_id)

    def resolve(self, plugin_dirs: Mapping[str, Union[str, Path]]) -> ResolvedPath:
        """Substitute the plugin directory once it is known

        Args:
            plugin_dirs: Mapping from plugin id to plugin directory

        Returns:
            Resolved path

        Raises:
            KeyError: If the plugin id has no known directory
        """
        if self.plugin_id not in plugin_dirs:
            raise KeyError(f"Plugin '{self.plugin_id}' has no known directory")

        return ResolvedPath(plugin_dirs[self.plugin_id], self.fragment, self.sep)


@dataclass(frozen=True)
class FeatureElement:
    """Attribute view of a feature declaration

    Mirrors the ``get`` interface of ``xml.etree.ElementTree.Element`` so
    parsed descriptor elements and this class are interchangeable.
    """

    file: str = ''
    value: str = ''
    type: str = ''

    def get(self, name: str, default: Any = '') -> Any:
        if name == FEATURE_FILE_ATTR:
            return self.file
        if name == FEATURE_VALUE_ATTR:
            return self.value
        if name == FEATURE_TYPE_ATTR:
            return self.type
        return default

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Optional[str]]) -> 'FeatureElement':
        """Create element view from an attribute mapping

        Args:
            attributes: Attribute name to value mapping, e.g. ``Element.attrib``

        Returns:
            FeatureElement instance
        """
        return cls(
            file=attributes.get(FEATURE_FILE_ATTR) or '',
            value=attributes.get(FEATURE_VALUE_ATTR) or '',
            type=attributes.get(FEATURE_TYPE_ATTR) or '',
        )


@dataclass(frozen=True)
class TemplateValue:
    """Template file contributed by a plugin"""

    id: Optional[str]
    value: str
