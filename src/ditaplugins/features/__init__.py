# -*- coding: utf-8 -*-
"""
Per-plugin feature registry
"""

from .registry import Features
from .paths import is_absolute_path, tokenize, resolve_file_token

__all__ = ['Features', 'is_absolute_path', 'tokenize', 'resolve_file_token']
