"""Tests for prayer service."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from salah_times.domain.models import AsrConvention, CalculationMethod, GeoLocation, Prayer
from salah_times.domain.rules import JamaatRuleSet, OffsetRule
from salah_times.services.prayer_service import PrayerService

RIYADH_TZ = ZoneInfo("Asia/Riyadh")
FRIDAY = date(2024, 6, 21)


def _makkah(hour: int, minute: int = 0, day: date = FRIDAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=RIYADH_TZ)


class TestPrayerService:
    """Prayer service tests."""

    @pytest.fixture
    def makkah_location(self) -> GeoLocation:
        """Makkah location."""
        return GeoLocation(
            latitude=21.3891,
            longitude=39.8579,
            timezone="Asia/Riyadh",
            label="Makkah, Saudi Arabia",
        )

    @pytest.fixture
    def service(self, makkah_location: GeoLocation) -> PrayerService:
        """Create prayer service."""
        return PrayerService(location=makkah_location)

    def test_defaults(self, service: PrayerService) -> None:
        assert service.method == CalculationMethod.MWL
        assert service.asr_convention == AsrConvention.STANDARD
        assert service.jamaat_rules == JamaatRuleSet()
        assert service.timezone_name == "Asia/Riyadh"

    def test_calculate(self, service: PrayerService) -> None:
        """Test calculating a day's prayer times."""
        times = service.calculate(FRIDAY)

        assert times.date == FRIDAY
        assert times.fajr < times.sunrise < times.dhuhr
        assert times.dhuhr < times.asr < times.maghrib < times.isha

    def test_calculate_range(self, service: PrayerService) -> None:
        """Test calculating multiple days."""
        times_list = service.calculate_range(FRIDAY, 7)

        assert len(times_list) == 7
        assert times_list[0].date == FRIDAY
        assert times_list[-1].date == FRIDAY + timedelta(days=6)

    def test_compute_jamaat_on_friday(self, service: PrayerService) -> None:
        jamaat = service.compute_jamaat(FRIDAY)
        assert jamaat.jumuah == _makkah(13, 30)
        assert jamaat.dhuhr == jamaat.jumuah

    def test_daily_schedule(self, service: PrayerService) -> None:
        schedule = service.daily_schedule(FRIDAY)
        entries = schedule.entries()

        assert schedule.is_friday is True
        assert [e.name for e in entries][2] == "jumuah"
        assert entries[0].jamaat == schedule.times.fajr + timedelta(minutes=20)

    def test_get_current_prayer(self, service: PrayerService) -> None:
        """Test getting current prayer."""
        assert service.get_current_prayer(_makkah(14, 0)) == "dhuhr"
        assert service.get_current_prayer(_makkah(10, 0)) == "sunrise"
        assert service.get_current_prayer(_makkah(23, 30)) == "isha"

    def test_before_fajr_is_still_isha(self, service: PrayerService) -> None:
        assert service.get_current_prayer(_makkah(3, 0)) == "isha"

    def test_get_next_prayer(self, service: PrayerService) -> None:
        """Test getting next prayer."""
        now = _makkah(14, 0)
        entry = service.get_next_prayer(now)
        times = service.calculate(FRIDAY)

        assert entry.name == "asr"
        assert entry.start == times.asr
        assert entry.jamaat == times.asr + timedelta(minutes=10)

    def test_next_prayer_is_jumuah_on_friday_morning(self, service: PrayerService) -> None:
        entry = service.get_next_prayer(_makkah(10, 0))
        assert entry.name == "jumuah"
        assert entry.jamaat == _makkah(13, 30)

    def test_next_prayer_after_isha_is_tomorrow_fajr(self, service: PrayerService) -> None:
        entry = service.get_next_prayer(_makkah(23, 30))
        assert entry.name == "fajr"
        assert entry.start.date() == FRIDAY + timedelta(days=1)

    def test_naive_datetime_is_local(self, service: PrayerService) -> None:
        naive = datetime(2024, 6, 21, 14, 0)
        assert service.get_current_prayer(naive) == "dhuhr"

    def test_other_timezone_is_converted(self, service: PrayerService) -> None:
        utc_now = datetime(2024, 6, 21, 11, 0, tzinfo=ZoneInfo("UTC"))
        assert service.get_current_prayer(utc_now) == "dhuhr"

    def test_time_until_next_prayer(self, service: PrayerService) -> None:
        """Test time until next prayer."""
        now = _makkah(14, 0)
        time_until = service.get_time_until_next_prayer(now)

        assert time_until == service.calculate(FRIDAY).asr - now
        assert timedelta(0) < time_until < timedelta(hours=3)

    def test_update_calculation(self, service: PrayerService) -> None:
        before = service.calculate(FRIDAY)
        service.update_calculation(asr_convention=AsrConvention.HANAFI)
        after = service.calculate(FRIDAY)

        assert service.method == CalculationMethod.MWL
        assert after.asr > before.asr

        service.update_calculation(method=CalculationMethod.UMM_AL_QURA)
        times = service.calculate(FRIDAY)
        assert times.isha - times.maghrib == timedelta(minutes=90)

    def test_update_jamaat_rules(self, service: PrayerService) -> None:
        service.update_jamaat_rules(JamaatRuleSet({Prayer.MAGHRIB: OffsetRule(15)}))
        jamaat = service.compute_jamaat(FRIDAY)
        assert jamaat.maghrib == service.calculate(FRIDAY).maghrib + timedelta(minutes=15)

    def test_update_location(self, service: PrayerService) -> None:
        karachi = GeoLocation(latitude=24.8607, longitude=67.0011, timezone="Asia/Karachi")
        service.update_location(karachi)

        assert service.location == karachi
        assert service.calculate(FRIDAY).dhuhr.tzinfo == ZoneInfo("Asia/Karachi")
