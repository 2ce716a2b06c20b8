"""Configuration for the FiqhQA backend."""

from fiqhqa_config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
