# -*- coding: utf-8 -*-
"""
Plugin requirement record
"""

from typing import Iterator, List

from ...constants import REQUIREMENT_SEPARATOR


class PluginRequirement:
    """Dependency of one plugin on another

    A requirement names one or more alternative plugin ids; any one of them
    satisfies it. Requirements are required unless marked otherwise.

    Example:
        >>> req = PluginRequirement()
        >>> req.add_plugins('org.dita.base|org.dita.base2')
        >>> list(req.get_plugins())
        ['org.dita.base', 'org.dita.base2']
    """

    def __init__(self, required: bool = True):
        self._plugins: List[str] = []
        self._required = required

    def add_plugins(self, plugins: str) -> None:
        """Add alternative plugin ids

        Args:
            plugins: Plugin ids separated by '|'
        """
        for plugin in plugins.split(REQUIREMENT_SEPARATOR):
            plugin = plugin.strip()
            if plugin:
                self._plugins.append(plugin)

    def get_plugins(self) -> Iterator[str]:
        return iter(list(self._plugins))

    @property
    def plugins(self) -> tuple:
        return tuple(self._plugins)

    def set_required(self, required: bool) -> None:
        self._required = required

    def get_required(self) -> bool:
        return self._required

    @property
    def required(self) -> bool:
        return self._required

    def __str__(self) -> str:
        return REQUIREMENT_SEPARATOR.join(self._plugins)

    def __repr__(self) -> str:
        return f"PluginRequirement(plugins={self._plugins}, required={self._required})"
