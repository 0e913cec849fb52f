"""
DesignOptions - Configuration Module
====================================

Zentrale Konfiguration für alle globalen Einstellungen.
"""

from .tool_settings import ToolSettings, has_constrain_modifier
from .feature_flags import is_enabled, set_flag, get_all_flags, FEATURE_FLAGS
