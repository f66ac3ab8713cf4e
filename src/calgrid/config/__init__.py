"""Configuration models and helpers."""

from __future__ import annotations

from .settings import ApiSettings, AppSettings, AuthSettings, StorageSettings, UiSettings, get_settings
from .theme import EVENT_COLORS, AppPalette

__all__ = [
    "EVENT_COLORS",
    "ApiSettings",
    "AppPalette",
    "AppSettings",
    "AuthSettings",
    "StorageSettings",
    "UiSettings",
    "get_settings",
]
