"""Tests for the jamaat rule engine."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from salah_times.domain.models import Prayer, PrayerTimes
from salah_times.domain.rules import FixedRule, JamaatRuleSet, OffsetRule
from salah_times.services.jamaat_calculator import compute_jamaat

TZ = ZoneInfo("Asia/Karachi")

FRIDAY = date(2024, 3, 22)
SATURDAY = date(2024, 3, 23)


def _at(day: date, hour: int, minute: int) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=TZ)


def _start_times(day: date) -> PrayerTimes:
    return PrayerTimes(
        date=day,
        fajr=_at(day, 5, 12),
        sunrise=_at(day, 6, 29),
        dhuhr=_at(day, 12, 36),
        asr=_at(day, 16, 2),
        maghrib=_at(day, 18, 43),
        isha=_at(day, 19, 57),
    )


@pytest.fixture
def saturday_times() -> PrayerTimes:
    return _start_times(SATURDAY)


@pytest.fixture
def friday_times() -> PrayerTimes:
    return _start_times(FRIDAY)


class TestDefaultRules:
    """Default rule set tests."""

    def test_default_offsets(self, saturday_times: PrayerTimes) -> None:
        jamaat = compute_jamaat(SATURDAY, saturday_times, JamaatRuleSet())
        assert jamaat.fajr == _at(SATURDAY, 5, 32)
        assert jamaat.dhuhr == _at(SATURDAY, 12, 46)
        assert jamaat.asr == _at(SATURDAY, 16, 12)
        assert jamaat.maghrib == _at(SATURDAY, 18, 48)
        assert jamaat.isha == _at(SATURDAY, 20, 7)
        assert jamaat.jumuah is None

    def test_friday_dhuhr_replaced_by_jumuah(self, friday_times: PrayerTimes) -> None:
        jamaat = compute_jamaat(FRIDAY, friday_times, JamaatRuleSet())
        assert jamaat.jumuah == _at(FRIDAY, 13, 30)
        assert jamaat.dhuhr == jamaat.jumuah
        assert jamaat.fajr == _at(FRIDAY, 5, 32)

    def test_jamaat_not_before_start_for_offsets(self, saturday_times: PrayerTimes) -> None:
        jamaat = compute_jamaat(SATURDAY, saturday_times, JamaatRuleSet())
        for prayer in (Prayer.FAJR, Prayer.DHUHR, Prayer.ASR, Prayer.MAGHRIB, Prayer.ISHA):
            assert jamaat.get_time(prayer) >= saturday_times.start_of(prayer)


class TestCustomRules:
    """Custom rule tests."""

    def test_zero_offset(self, saturday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet({Prayer.MAGHRIB: OffsetRule(0)})
        assert compute_jamaat(SATURDAY, saturday_times, rules).maghrib == saturday_times.maghrib

    def test_fixed_rule(self, saturday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet({Prayer.ISHA: FixedRule(hour12=8, minute=30, is_pm=True)})
        jamaat = compute_jamaat(SATURDAY, saturday_times, rules)
        assert jamaat.isha == _at(SATURDAY, 20, 30)
        assert jamaat.isha.tzinfo == TZ

    def test_fixed_rule_before_start_is_allowed(self, saturday_times: PrayerTimes) -> None:
        """Sabit saat vakitten önce olsa bile olduğu gibi kullanılır."""
        rules = JamaatRuleSet({Prayer.ASR: FixedRule(hour12=3, minute=0, is_pm=True)})
        jamaat = compute_jamaat(SATURDAY, saturday_times, rules)
        assert jamaat.asr == _at(SATURDAY, 15, 0)
        assert jamaat.asr < saturday_times.asr

    def test_twelve_am_and_pm(self, saturday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet(
            {
                Prayer.FAJR: FixedRule(hour12=12, minute=10, is_pm=False),
                Prayer.DHUHR: FixedRule(hour12=12, minute=50, is_pm=True),
            }
        )
        jamaat = compute_jamaat(SATURDAY, saturday_times, rules)
        assert jamaat.fajr == _at(SATURDAY, 0, 10)
        assert jamaat.dhuhr == _at(SATURDAY, 12, 50)

    def test_jumuah_offset_follows_dhuhr(self, friday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet({Prayer.JUMUAH: OffsetRule(30)})
        jamaat = compute_jamaat(FRIDAY, friday_times, rules)
        assert jamaat.jumuah == _at(FRIDAY, 13, 6)
        assert jamaat.dhuhr == jamaat.jumuah

    def test_jumuah_rule_ignored_on_other_days(self, saturday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet({Prayer.JUMUAH: FixedRule(hour12=2, minute=0, is_pm=True)})
        jamaat = compute_jamaat(SATURDAY, saturday_times, rules)
        assert jamaat.jumuah is None
        assert jamaat.dhuhr == _at(SATURDAY, 12, 46)

    def test_rules_from_line(self, friday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet.parse("Fajr:O:30|Isha:F:9,15,PM|Jumuah:F:1,15,PM")
        jamaat = compute_jamaat(FRIDAY, friday_times, rules)
        assert jamaat.fajr == _at(FRIDAY, 5, 42)
        assert jamaat.isha == _at(FRIDAY, 21, 15)
        assert jamaat.jumuah == _at(FRIDAY, 13, 15)
        assert jamaat.asr == _at(FRIDAY, 16, 12)

    def test_invalid_rule_uses_default(self, saturday_times: PrayerTimes) -> None:
        rules = JamaatRuleSet({Prayer.FAJR: None})  # type: ignore[dict-item]
        assert compute_jamaat(SATURDAY, saturday_times, rules).fajr == _at(SATURDAY, 5, 32)
