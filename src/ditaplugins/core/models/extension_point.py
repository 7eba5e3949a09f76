# -*- coding: utf-8 -*-
"""
Extension point value object
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExtensionPoint:
    """A named hook a plugin publishes for other plugins to contribute into

    Attributes:
        id: Extension point id, the key used by the feature registry
        name: Optional human-readable name
        plugin_id: Id of the plugin that publishes the point
    """

    id: str
    name: Optional[str] = None
    plugin_id: Optional[str] = None
