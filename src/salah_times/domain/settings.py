"""User preferences consumed by the calculators."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Self

from babel import Locale, UnknownLocaleError

from salah_times.domain.models import AsrConvention, CalculationMethod, GeoLocation
from salah_times.domain.rules import JamaatRuleSet

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


def _enum_or_default(enum_cls: type[Enum], value: object, default: Enum):
    try:
        return enum_cls(value)
    except ValueError:
        return default


def _locale_or_default(value: object) -> str:
    """babel'in tanımadığı dil kodları varsayılana döner."""
    if not value or not isinstance(value, str):
        return DEFAULT_LOCALE
    try:
        Locale.parse(value)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Bilinmeyen dil {value!r}, {DEFAULT_LOCALE} kullanılıyor: {e}")
        return DEFAULT_LOCALE
    return value


@dataclass
class AppSettings:
    """Uygulama ayarları.

    ``location`` verilmişse şehir etiketine göre arama yapılmaz.
    """

    city: str = ""
    location: GeoLocation | None = None
    method: CalculationMethod = CalculationMethod.MWL
    asr_convention: AsrConvention = AsrConvention.STANDARD
    jamaat_rules: JamaatRuleSet = field(default_factory=JamaatRuleSet)
    locale: str = DEFAULT_LOCALE

    def to_dict(self) -> dict:
        """Dictionary olarak döndür."""
        return {
            "city": self.city,
            "location": self.location.to_dict() if self.location else None,
            "method": self.method.value,
            "asr_convention": self.asr_convention.value,
            "jamaat_rules": self.jamaat_rules.format(),
            "locale": self.locale,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Dictionary'den oluştur. Bilinmeyen değerler varsayılana döner."""
        location_data = data.get("location")
        return cls(
            city=data.get("city", ""),
            location=GeoLocation.from_dict(location_data) if location_data else None,
            method=_enum_or_default(CalculationMethod, data.get("method"), CalculationMethod.MWL),
            asr_convention=_enum_or_default(
                AsrConvention, data.get("asr_convention"), AsrConvention.STANDARD
            ),
            jamaat_rules=JamaatRuleSet.parse(data.get("jamaat_rules") or ""),
            locale=_locale_or_default(data.get("locale")),
        )
