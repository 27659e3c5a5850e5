"""Configuration package."""

from contact_manager.config.settings import ContactSettings, get_settings

__all__ = [
    "ContactSettings",
    "get_settings",
]
