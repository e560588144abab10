"""Jamaat (cemaat) rule value objects and their line format.

A rule set is persisted as a single line, one token per prayer::

    Fajr:O:20|Dhuhr:O:10|Asr:O:10|Maghrib:O:5|Isha:O:10|Jumuah:F:1,30,PM

``O:<minutes>`` is an offset after the prayer's start time and
``F:<hour12>,<minute>,<AM|PM>`` a fixed wall-clock time.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Self

from salah_times.domain.models import Prayer

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = "|"


@dataclass(frozen=True)
class OffsetRule:
    """Cemaat, vaktin girmesinden belirli dakika sonra."""

    minutes: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValueError(f"Offset negatif olamaz: {self.minutes}")

    def apply(self, day: date, start: datetime) -> datetime:
        """Başlangıç vaktine offset ekle."""
        return start + timedelta(minutes=self.minutes)

    def format(self) -> str:
        return f"O:{self.minutes}"


@dataclass(frozen=True)
class FixedRule:
    """Cemaat, sabit bir saatte (12 saat formatı)."""

    hour12: int
    minute: int
    is_pm: bool

    def __post_init__(self) -> None:
        if not 1 <= self.hour12 <= 12:
            raise ValueError(f"Geçersiz saat (1-12): {self.hour12}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Geçersiz dakika (0-59): {self.minute}")

    @property
    def hour24(self) -> int:
        """24 saat formatında saat (12 AM -> 0, 12 PM -> 12)."""
        hour = self.hour12 % 12
        return hour + 12 if self.is_pm else hour

    @property
    def wall_time(self) -> time:
        return time(self.hour24, self.minute)

    def apply(self, day: date, start: datetime) -> datetime:
        """Sabit saati güne uygula; başlangıç vakti yalnızca timezone için kullanılır."""
        return datetime.combine(day, self.wall_time, tzinfo=start.tzinfo)

    def format(self) -> str:
        return f"F:{self.hour12},{self.minute},{'PM' if self.is_pm else 'AM'}"


JamaatRule = OffsetRule | FixedRule


DEFAULT_RULES: dict[Prayer, JamaatRule] = {
    Prayer.FAJR: OffsetRule(20),
    Prayer.DHUHR: OffsetRule(10),
    Prayer.ASR: OffsetRule(10),
    Prayer.MAGHRIB: OffsetRule(5),
    Prayer.ISHA: OffsetRule(10),
    Prayer.JUMUAH: FixedRule(hour12=1, minute=30, is_pm=True),
}


def _complete(rules: dict[Prayer, JamaatRule]) -> dict[Prayer, JamaatRule]:
    return {prayer: rules.get(prayer, DEFAULT_RULES[prayer]) for prayer in Prayer}


@dataclass(frozen=True)
class JamaatRuleSet:
    """Her namaz için bir cemaat kuralı.

    Eksik namazlar varsayılan kuralla tamamlanır; bu yüzden ``get`` her
    zaman bir kural döndürür.
    """

    rules: dict[Prayer, JamaatRule] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", _complete(self.rules))

    def get(self, prayer: Prayer) -> JamaatRule:
        """Namazın kuralını döndür. Tanınmayan kural tipi varsayılana düşer."""
        rule = self.rules.get(prayer)
        if not isinstance(rule, OffsetRule | FixedRule):
            return DEFAULT_RULES[prayer]
        return rule

    def __getitem__(self, prayer: Prayer) -> JamaatRule:
        return self.get(prayer)

    def with_rule(self, prayer: Prayer, rule: JamaatRule) -> Self:
        """Tek bir kuralı değiştirilmiş yeni kural seti."""
        return type(self)({**self.rules, prayer: rule})

    def format(self) -> str:
        """Satır formatına çevir."""
        return TOKEN_SEPARATOR.join(
            f"{prayer.label}:{self.get(prayer).format()}" for prayer in Prayer
        )

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Satır formatından oluştur. Hatalı parçalar atlanır, hata fırlatmaz."""
        rules: dict[Prayer, JamaatRule] = {}
        for token in raw.split(TOKEN_SEPARATOR):
            token = token.strip()
            if not token or ":" not in token:
                continue
            name, rest = token.split(":", 1)
            prayer = _prayer_by_name(name)
            if prayer is None:
                logger.debug(f"Bilinmeyen namaz adı: {token!r}")
                continue
            rule = _parse_rule(prayer, rest.strip())
            if rule is None:
                logger.debug(f"Hatalı kural atlandı: {token!r}")
                continue
            rules[prayer] = rule
        return cls(rules)


def _prayer_by_name(name: str) -> Prayer | None:
    name = name.strip().lower()
    for prayer in Prayer:
        if prayer.value == name:
            return prayer
    return None


def _to_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_rule(prayer: Prayer, body: str) -> JamaatRule | None:
    kind, _, tail = body.partition(":")
    kind = kind.strip().upper()

    if kind == "O":
        default = DEFAULT_RULES[prayer]
        fallback = default.minutes if isinstance(default, OffsetRule) else 0
        return OffsetRule(max(0, _to_int(tail, fallback)))

    if kind == "F":
        parts = tail.split(",")
        if len(parts) < 3:
            return None
        hour = min(max(_to_int(parts[0], 1), 1), 12)
        minute = min(max(_to_int(parts[1], 30), 0), 59)
        return FixedRule(hour12=hour, minute=minute, is_pm=parts[2].strip().upper() == "PM")

    return None
