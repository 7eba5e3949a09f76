# -*- coding: utf-8 -*-
"""
Reserved literals shared across the plugin integration pipeline
"""

# Separator between values in a feature's value/file attribute
FEAT_VALUE_SEPARATOR = ','

# Feature element attributes
FEATURE_FILE_ATTR = 'file'
FEATURE_VALUE_ATTR = 'value'
FEATURE_TYPE_ATTR = 'type'
FEATURE_TYPE_VALUE_FILE = 'file'

# Requirement importance
REQUIRE_IMPORTANCE_VALUE_REQUIRED = 'required'
REQUIREMENT_SEPARATOR = '|'

# Feature whose relative files stay symbolic until all plugins are known
ANT_IMPORT_FEATURE = 'ant.import'

# Build property holding a plugin's directory
PLUGIN_DIR_PROPERTY = 'dita.plugin.{id}.dir'
