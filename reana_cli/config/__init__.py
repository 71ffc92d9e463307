"""
Configuration for the REANA client: environment settings, static tables and
input validators.
"""

from reana_cli.config.settings import (
    ConfigStore,
    ReanaSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ConfigStore",
    "ReanaSettings",
    "clear_settings_cache",
    "get_settings",
]
