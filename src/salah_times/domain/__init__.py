"""Domain layer - Business entities and value objects."""

from salah_times.domain.models import (
    DAILY_PRAYERS,
    AsrConvention,
    CalculationMethod,
    DaySchedule,
    GeoLocation,
    IshaAngle,
    IshaInterval,
    JamaatTimes,
    Prayer,
    PrayerTimes,
    ScheduleEntry,
)
from salah_times.domain.rules import (
    DEFAULT_RULES,
    FixedRule,
    JamaatRule,
    JamaatRuleSet,
    OffsetRule,
)
from salah_times.domain.settings import AppSettings

__all__ = [
    "DAILY_PRAYERS",
    "DEFAULT_RULES",
    "AppSettings",
    "AsrConvention",
    "CalculationMethod",
    "DaySchedule",
    "FixedRule",
    "GeoLocation",
    "IshaAngle",
    "IshaInterval",
    "JamaatRule",
    "JamaatRuleSet",
    "JamaatTimes",
    "OffsetRule",
    "Prayer",
    "PrayerTimes",
    "ScheduleEntry",
]
