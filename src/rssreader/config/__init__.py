"""Configuration package."""

from rssreader.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
