"""Service layer - Business logic."""

from salah_times.services.jamaat_calculator import compute_jamaat
from salah_times.services.ports import (
    LocationResolverPort,
    PrayerTimeCalculatorPort,
    SettingsRepositoryPort,
)
from salah_times.services.prayer_calculator import calculate
from salah_times.services.prayer_service import PrayerService

__all__ = [
    "LocationResolverPort",
    "PrayerService",
    "PrayerTimeCalculatorPort",
    "SettingsRepositoryPort",
    "calculate",
    "compute_jamaat",
]
