# -*- coding: utf-8 -*-
"""
Feature value tokenizing and file path resolution
"""

import os
import re
from pathlib import Path
from typing import List, Optional, Union

from ..core.models.values import DeferredVariableReference, ResolvedPath

_WINDOWS_ABSOLUTE = re.compile(r'([a-zA-Z]:|\\)\\.*')


def is_absolute_path(path: Optional[str], sep: str = os.sep) -> bool:
    """Check whether a feature path is absolute

    Args:
        path: Path string
        sep: Path separator of the target platform

    Returns:
        True for '/...' on POSIX, 'C:\\...' or '\\\\...' on Windows
    """
    if path is None or not path.strip():
        return False
    if sep == '/':
        return path.startswith('/')
    if sep == '\\' and len(path) > 2:
        return _WINDOWS_ABSOLUTE.fullmatch(path) is not None
    return False


def tokenize(value: Optional[str], separator: str) -> List[str]:
    """Split a feature value on the separator

    Tokens are trimmed and blank tokens are dropped.

    Example:
        >>> tokenize(' a.xml, ,b.xml,', ',')
        ['a.xml', 'b.xml']
    """
    if not value:
        return []
    return [token.strip() for token in value.split(separator) if token.strip()]


def resolve_file_token(
    feature_id: str,
    token: str,
    plugin_id: Optional[str],
    plugin_dir: Union[str, Path],
    import_feature_id: str,
    property_template: str,
    sep: str = os.sep
) -> str:
    """Resolve one token of a file feature

    Args:
        feature_id: Id of the feature being declared
        token: Trimmed token
        plugin_id: Id of the declaring plugin
        plugin_dir: Directory of the declaring plugin
        import_feature_id: Feature id whose files stay symbolic
        property_template: Plugin directory property name template
        sep: Path separator

    Returns:
        The token itself if absolute, a DeferredVariableReference for the
        import feature, otherwise a ResolvedPath under the plugin directory
    """
    if is_absolute_path(token, sep):
        return token
    if feature_id == import_feature_id:
        return DeferredVariableReference(plugin_id, token, sep, property_template)
    return ResolvedPath(plugin_dir, token, sep)
