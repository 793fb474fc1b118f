"""Configuration module for SeedShelf."""

from .settings import (
    CategorySettings,
    ObservabilitySettings,
    PathSettings,
    Settings,
    get_settings,
)

__all__ = [
    "CategorySettings",
    "ObservabilitySettings",
    "PathSettings",
    "Settings",
    "get_settings",
]
