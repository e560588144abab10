"""Infrastructure layer - Adapters and implementations."""

from salah_times.infrastructure.city_directory import StaticCityResolver
from salah_times.infrastructure.settings_repository import JsonSettingsRepository

__all__ = [
    "JsonSettingsRepository",
    "StaticCityResolver",
]
