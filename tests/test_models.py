"""Tests for domain models."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from salah_times.domain.models import (
    AsrConvention,
    CalculationMethod,
    DaySchedule,
    GeoLocation,
    IshaAngle,
    IshaInterval,
    JamaatTimes,
    Prayer,
    PrayerTimes,
)
from salah_times.domain.rules import FixedRule, JamaatRuleSet, OffsetRule
from salah_times.domain.settings import AppSettings

UTC = ZoneInfo("UTC")


def _at(day: date, hour: int, minute: int) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=UTC)


@pytest.fixture
def friday() -> date:
    return date(2024, 3, 22)


@pytest.fixture
def saturday() -> date:
    return date(2024, 3, 23)


def _sample_times(day: date) -> PrayerTimes:
    return PrayerTimes(
        date=day,
        fajr=_at(day, 5, 10),
        sunrise=_at(day, 6, 30),
        dhuhr=_at(day, 12, 35),
        asr=_at(day, 15, 55),
        maghrib=_at(day, 18, 40),
        isha=_at(day, 19, 55),
    )


class TestGeoLocation:
    """GeoLocation model tests."""

    def test_valid_location(self) -> None:
        """Test valid location creation."""
        loc = GeoLocation(latitude=24.86, longitude=67.0, timezone="Asia/Karachi", label="Karachi")
        assert loc.latitude == 24.86
        assert loc.tzinfo == ZoneInfo("Asia/Karachi")

    def test_invalid_latitude(self) -> None:
        """Test invalid latitude raises error."""
        with pytest.raises(ValueError, match="Geçersiz enlem"):
            GeoLocation(latitude=91.0, longitude=29.0)

    def test_invalid_longitude(self) -> None:
        """Test invalid longitude raises error."""
        with pytest.raises(ValueError, match="Geçersiz boylam"):
            GeoLocation(latitude=41.0, longitude=181.0)

    def test_unknown_timezone(self) -> None:
        """Test unknown timezone raises error."""
        with pytest.raises(ValueError, match="Bilinmeyen timezone"):
            GeoLocation(latitude=41.0, longitude=29.0, timezone="Mars/Olympus_Mons")

    def test_location_immutable(self) -> None:
        """Test location is immutable."""
        loc = GeoLocation(latitude=41.0, longitude=29.0)
        with pytest.raises(Exception):  # FrozenInstanceError
            loc.latitude = 42.0  # type: ignore

    def test_dict_round_trip(self) -> None:
        loc = GeoLocation(latitude=41.0, longitude=29.0, timezone="Europe/Istanbul", label="Ist")
        assert GeoLocation.from_dict(loc.to_dict()) == loc


class TestCalculationMethod:
    """CalculationMethod tests."""

    def test_angle_methods(self) -> None:
        assert CalculationMethod.MWL.fajr_angle == 18.0
        assert CalculationMethod.MWL.isha == IshaAngle(17.0)
        assert CalculationMethod.ISNA.isha == IshaAngle(15.0)
        assert CalculationMethod.EGYPTIAN.fajr_angle == 19.5
        assert CalculationMethod.KARACHI.isha == IshaAngle(18.0)

    def test_interval_methods(self) -> None:
        """Umm al-Qura ve Tahran yatsıyı sabit aralıkla belirler."""
        assert CalculationMethod.UMM_AL_QURA.isha == IshaInterval(90)
        assert CalculationMethod.TEHRAN.isha == IshaInterval(90)
        assert CalculationMethod.UMM_AL_QURA.fajr_angle == 18.5

    def test_every_method_has_display_name(self) -> None:
        for method in CalculationMethod:
            assert method.display_name


class TestAsrConvention:
    """AsrConvention tests."""

    def test_shadow_factors(self) -> None:
        assert AsrConvention.STANDARD.shadow_factor == 1.0
        assert AsrConvention.HANAFI.shadow_factor == 2.0


class TestPrayer:
    """Prayer enum tests."""

    def test_labels(self) -> None:
        assert Prayer.FAJR.label == "Fajr"
        assert Prayer.JUMUAH.label == "Jumuah"

    def test_display_names(self) -> None:
        assert Prayer.MAGHRIB.display_name == "Maghrib"
        assert Prayer.JUMUAH.display_name == "Jumu'ah"

    def test_sunrise_is_not_a_prayer(self) -> None:
        assert "sunrise" not in [p.value for p in Prayer]


class TestPrayerTimes:
    """PrayerTimes tests."""

    def test_items_in_day_order(self, saturday: date) -> None:
        times = _sample_times(saturday)
        names = [name for name, _ in times.items()]
        assert names == ["fajr", "sunrise", "dhuhr", "asr", "maghrib", "isha"]

    def test_get_time(self, saturday: date) -> None:
        times = _sample_times(saturday)
        assert times.get_time("sunrise") == _at(saturday, 6, 30)
        with pytest.raises(KeyError):
            times.get_time("date")

    def test_start_of_jumuah_is_dhuhr(self, friday: date) -> None:
        times = _sample_times(friday)
        assert times.start_of(Prayer.JUMUAH) == times.dhuhr
        assert times.start_of(Prayer.ASR) == times.asr

    def test_to_dict(self, saturday: date) -> None:
        data = _sample_times(saturday).to_dict()
        assert data["date"] == "2024-03-23"
        assert data["fajr"] == "05:10"
        assert data["maghrib"] == "18:40"


class TestJamaatTimes:
    """JamaatTimes tests."""

    def test_midday_on_friday(self, friday: date) -> None:
        jamaat = JamaatTimes(
            date=friday,
            fajr=_at(friday, 5, 30),
            dhuhr=_at(friday, 13, 30),
            asr=_at(friday, 16, 5),
            maghrib=_at(friday, 18, 45),
            isha=_at(friday, 20, 5),
            jumuah=_at(friday, 13, 30),
        )
        assert jamaat.is_friday is True
        assert jamaat.midday == _at(friday, 13, 30)
        assert jamaat.to_dict()["jumuah"] == "13:30"

    def test_midday_on_other_days(self, saturday: date) -> None:
        jamaat = JamaatTimes(
            date=saturday,
            fajr=_at(saturday, 5, 30),
            dhuhr=_at(saturday, 12, 45),
            asr=_at(saturday, 16, 5),
            maghrib=_at(saturday, 18, 45),
            isha=_at(saturday, 20, 5),
        )
        assert jamaat.is_friday is False
        assert jamaat.midday == _at(saturday, 12, 45)
        assert jamaat.to_dict()["jumuah"] is None


class TestDaySchedule:
    """DaySchedule tests."""

    def test_friday_entries_show_jumuah(self, friday: date) -> None:
        times = _sample_times(friday)
        jamaat = JamaatTimes(
            date=friday,
            fajr=_at(friday, 5, 30),
            dhuhr=_at(friday, 13, 30),
            asr=_at(friday, 16, 5),
            maghrib=_at(friday, 18, 45),
            isha=_at(friday, 20, 5),
            jumuah=_at(friday, 13, 30),
        )
        entries = DaySchedule(times=times, jamaat=jamaat).entries()

        assert [e.name for e in entries] == [
            "fajr",
            "sunrise",
            "jumuah",
            "asr",
            "maghrib",
            "isha",
        ]
        assert entries[1].jamaat is None
        assert entries[2].start == times.dhuhr
        assert entries[2].jamaat == _at(friday, 13, 30)


class TestAppSettings:
    """AppSettings tests."""

    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.method == CalculationMethod.MWL
        assert settings.asr_convention == AsrConvention.STANDARD
        assert settings.jamaat_rules == JamaatRuleSet()
        assert settings.location is None

    def test_dict_round_trip(self) -> None:
        settings = AppSettings(
            city="Karachi, Pakistan",
            location=GeoLocation(24.8607, 67.0011, "Asia/Karachi"),
            method=CalculationMethod.KARACHI,
            asr_convention=AsrConvention.HANAFI,
            jamaat_rules=JamaatRuleSet(
                {Prayer.FAJR: OffsetRule(30), Prayer.ISHA: FixedRule(8, 45, True)}
            ),
            locale="ur",
        )
        assert AppSettings.from_dict(settings.to_dict()) == settings

    def test_rules_stored_as_line(self) -> None:
        data = AppSettings().to_dict()
        assert data["jamaat_rules"] == (
            "Fajr:O:20|Dhuhr:O:10|Asr:O:10|Maghrib:O:5|Isha:O:10|Jumuah:F:1,30,PM"
        )

    def test_unknown_values_fall_back(self) -> None:
        settings = AppSettings.from_dict(
            {"method": "moon_sighting", "asr_convention": "other", "jamaat_rules": "garbage"}
        )
        assert settings.method == CalculationMethod.MWL
        assert settings.asr_convention == AsrConvention.STANDARD
        assert settings.jamaat_rules == JamaatRuleSet()
