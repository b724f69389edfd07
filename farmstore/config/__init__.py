"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from farmstore.config import get_settings, Settings

    settings = get_settings()
    print(settings.data_path)
    print(settings.default_tax_rate)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
