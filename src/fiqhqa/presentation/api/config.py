"""API configuration adapter.

Bridges the centralized fiqhqa_config settings with the API layer.
"""

from fiqhqa_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration.

    Kept as its own dependency so an app built with explicit settings
    can override it.
    """
    return get_settings()
