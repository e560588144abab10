"""Domain models and value objects."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class AsrConvention(str, Enum):
    """İkindi vakti için fıkhi gölge kuralı."""

    STANDARD = "standard"
    HANAFI = "hanafi"

    @property
    def shadow_factor(self) -> float:
        """Gölge boyu çarpanı (1=Standart, 2=Hanefi)."""
        factors = {
            AsrConvention.STANDARD: 1.0,
            AsrConvention.HANAFI: 2.0,
        }
        return factors[self]

    @property
    def display_name(self) -> str:
        """Görüntüleme adı."""
        names = {
            AsrConvention.STANDARD: "Standard (Shafi'i, Maliki, Hanbali)",
            AsrConvention.HANAFI: "Hanafi",
        }
        return names[self]


@dataclass(frozen=True)
class IshaAngle:
    """Yatsı vakti güneşin ufkun altındaki açısıyla belirlenir."""

    degrees: float


@dataclass(frozen=True)
class IshaInterval:
    """Yatsı vakti akşamdan sabit bir süre sonradır."""

    minutes: int


IshaRule = IshaAngle | IshaInterval


@dataclass(frozen=True)
class MethodParameters:
    """Bir hesaplama metodunun açı parametreleri."""

    fajr_angle: float
    isha: IshaRule


class CalculationMethod(str, Enum):
    """Hesaplama metotları."""

    MWL = "mwl"
    ISNA = "isna"
    EGYPTIAN = "egyptian"
    KARACHI = "karachi"
    UMM_AL_QURA = "umm_al_qura"
    TEHRAN = "tehran"

    @property
    def parameters(self) -> MethodParameters:
        """Metodun imsak/yatsı parametreleri."""
        return _METHOD_PARAMETERS[self]

    @property
    def fajr_angle(self) -> float:
        """İmsak açısı (derece)."""
        return self.parameters.fajr_angle

    @property
    def isha(self) -> IshaRule:
        """Yatsı kuralı (açı veya sabit aralık)."""
        return self.parameters.isha

    @property
    def display_name(self) -> str:
        """Görüntüleme adı."""
        names = {
            CalculationMethod.MWL: "Muslim World League",
            CalculationMethod.ISNA: "Islamic Society of North America",
            CalculationMethod.EGYPTIAN: "Egyptian General Authority of Survey",
            CalculationMethod.KARACHI: "University of Islamic Sciences, Karachi",
            CalculationMethod.UMM_AL_QURA: "Umm al-Qura University, Makkah",
            CalculationMethod.TEHRAN: "Institute of Geophysics, University of Tehran",
        }
        return names[self]


_METHOD_PARAMETERS: dict[CalculationMethod, MethodParameters] = {
    CalculationMethod.MWL: MethodParameters(fajr_angle=18.0, isha=IshaAngle(17.0)),
    CalculationMethod.ISNA: MethodParameters(fajr_angle=15.0, isha=IshaAngle(15.0)),
    CalculationMethod.EGYPTIAN: MethodParameters(fajr_angle=19.5, isha=IshaAngle(17.5)),
    CalculationMethod.KARACHI: MethodParameters(fajr_angle=18.0, isha=IshaAngle(18.0)),
    CalculationMethod.UMM_AL_QURA: MethodParameters(fajr_angle=18.5, isha=IshaInterval(90)),
    CalculationMethod.TEHRAN: MethodParameters(fajr_angle=19.5, isha=IshaInterval(90)),
}


class Prayer(str, Enum):
    """Cemaat kuralı tanımlanabilen namazlar (güneş hariç)."""

    FAJR = "fajr"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"
    JUMUAH = "jumuah"

    @property
    def label(self) -> str:
        """Kural satırında kullanılan ad."""
        return self.value.capitalize()

    @property
    def display_name(self) -> str:
        """Görüntüleme adı."""
        if self is Prayer.JUMUAH:
            return "Jumu'ah"
        return self.label


DAILY_PRAYERS: tuple[Prayer, ...] = (
    Prayer.FAJR,
    Prayer.DHUHR,
    Prayer.ASR,
    Prayer.MAGHRIB,
    Prayer.ISHA,
)

FRIDAY = 4  # date.weekday()

# PrayerTimes alanları, gün içindeki sırayla
TIME_FIELDS: tuple[str, ...] = ("fajr", "sunrise", "dhuhr", "asr", "maghrib", "isha")


@dataclass(frozen=True)
class GeoLocation:
    """Konum bilgisi (immutable value object)."""

    latitude: float
    longitude: float
    timezone: str = "UTC"
    label: str = ""

    def __post_init__(self) -> None:
        """Koordinat ve timezone doğrulaması."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Geçersiz enlem: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Geçersiz boylam: {self.longitude}")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Bilinmeyen timezone: {self.timezone}") from e

    @property
    def tzinfo(self) -> ZoneInfo:
        """Timezone nesnesi."""
        return ZoneInfo(self.timezone)

    def to_dict(self) -> dict:
        """Dictionary olarak döndür."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "timezone": self.timezone,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Dictionary'den oluştur."""
        return cls(
            latitude=data.get("latitude", 0.0),
            longitude=data.get("longitude", 0.0),
            timezone=data.get("timezone", "UTC"),
            label=data.get("label", ""),
        )


@dataclass(frozen=True)
class PrayerTimes:
    """Bir günün başlangıç vakitleri (yerel saat, timezone bilgili)."""

    date: date
    fajr: datetime
    sunrise: datetime
    dhuhr: datetime
    asr: datetime
    maghrib: datetime
    isha: datetime

    def get_time(self, name: str) -> datetime:
        """Alan adıyla vakti döndür (ör. "sunrise")."""
        if name not in TIME_FIELDS:
            raise KeyError(name)
        return getattr(self, name)

    def start_of(self, prayer: Prayer) -> datetime:
        """Namazın başlangıç vakti. Cuma namazı öğle vaktinde başlar."""
        if prayer is Prayer.JUMUAH:
            return self.dhuhr
        return getattr(self, prayer.value)

    def items(self) -> list[tuple[str, datetime]]:
        """Tüm vakitleri sıralı (ad, vakit) listesi olarak döndür."""
        return [(name, getattr(self, name)) for name in TIME_FIELDS]

    def to_dict(self) -> dict[str, str]:
        """Dictionary olarak döndür."""
        data = {"date": self.date.isoformat()}
        data.update({name: value.strftime("%H:%M") for name, value in self.items()})
        return data


@dataclass(frozen=True)
class JamaatTimes:
    """Bir günün cemaat saatleri.

    Cuma günü ``dhuhr`` alanı ``jumuah`` ile aynıdır; diğer günlerde
    ``jumuah`` None kalır.
    """

    date: date
    fajr: datetime
    dhuhr: datetime
    asr: datetime
    maghrib: datetime
    isha: datetime
    jumuah: datetime | None = None

    @property
    def is_friday(self) -> bool:
        """Cuma günü mü?"""
        return self.date.weekday() == FRIDAY

    @property
    def midday(self) -> datetime:
        """Öğle cemaati; cuma günü Jumu'ah."""
        return self.jumuah if self.jumuah is not None else self.dhuhr

    def get_time(self, prayer: Prayer) -> datetime | None:
        """Namazın cemaat saatini döndür."""
        return getattr(self, prayer.value)

    def to_dict(self) -> dict[str, str | None]:
        """Dictionary olarak döndür."""
        data: dict[str, str | None] = {"date": self.date.isoformat()}
        for prayer in DAILY_PRAYERS:
            data[prayer.value] = getattr(self, prayer.value).strftime("%H:%M")
        data["jumuah"] = self.jumuah.strftime("%H:%M") if self.jumuah else None
        return data


@dataclass(frozen=True)
class ScheduleEntry:
    """Günlük çizelgedeki tek satır."""

    name: str
    start: datetime
    jamaat: datetime | None = None

    @property
    def display_name(self) -> str:
        """Görüntüleme adı."""
        return self.name.capitalize()


@dataclass(frozen=True)
class DaySchedule:
    """Başlangıç vakitleri ve cemaat saatleri birlikte."""

    times: PrayerTimes
    jamaat: JamaatTimes

    @property
    def date(self) -> date:
        return self.times.date

    @property
    def is_friday(self) -> bool:
        return self.jamaat.is_friday

    def entries(self) -> list[ScheduleEntry]:
        """Güneş dahil tüm vakitleri, varsa cemaat saatiyle döndür."""
        result = []
        for name, start in self.times.items():
            if name == "sunrise":
                result.append(ScheduleEntry(name=name, start=start))
            elif name == "dhuhr" and self.is_friday:
                result.append(ScheduleEntry(name="jumuah", start=start, jamaat=self.jamaat.jumuah))
            else:
                result.append(
                    ScheduleEntry(name=name, start=start, jamaat=self.jamaat.get_time(Prayer(name)))
                )
        return result


