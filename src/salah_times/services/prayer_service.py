"""Prayer time service bound to one location and set of preferences."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from salah_times.domain.models import (
    AsrConvention,
    CalculationMethod,
    DaySchedule,
    GeoLocation,
    JamaatTimes,
    PrayerTimes,
    ScheduleEntry,
)
from salah_times.domain.rules import JamaatRuleSet
from salah_times.services.jamaat_calculator import compute_jamaat
from salah_times.services.ports import PrayerTimeCalculatorPort
from salah_times.services.prayer_calculator import calculate


class PrayerService(PrayerTimeCalculatorPort):
    """Namaz vakti ve cemaat saati servisi.

    Hesaplamanın kendisi ``calculate`` ve ``compute_jamaat`` fonksiyonlarına
    bırakılır; servis yalnızca ayarları taşır.
    """

    def __init__(
        self,
        location: GeoLocation,
        *,
        method: CalculationMethod = CalculationMethod.MWL,
        asr_convention: AsrConvention = AsrConvention.STANDARD,
        jamaat_rules: JamaatRuleSet | None = None,
    ) -> None:
        """
        Initialize prayer service.

        Args:
            location: Konum bilgisi (timezone dahil)
            method: Hesaplama metodu
            asr_convention: İkindi kuralı
            jamaat_rules: Cemaat kuralları (varsayılan: JamaatRuleSet())
        """
        self._location = location
        self._method = method
        self._asr_convention = asr_convention
        self._jamaat_rules = jamaat_rules or JamaatRuleSet()

    @property
    def location(self) -> GeoLocation:
        """Konum bilgisi."""
        return self._location

    @property
    def timezone(self) -> ZoneInfo:
        """Timezone nesnesi."""
        return self._location.tzinfo

    @property
    def timezone_name(self) -> str:
        """Timezone adı."""
        return self._location.timezone

    @property
    def method(self) -> CalculationMethod:
        return self._method

    @property
    def asr_convention(self) -> AsrConvention:
        return self._asr_convention

    @property
    def jamaat_rules(self) -> JamaatRuleSet:
        """Cemaat kuralları."""
        return self._jamaat_rules

    def update_location(self, location: GeoLocation) -> None:
        """Konum güncelle."""
        self._location = location

    def update_calculation(
        self,
        method: CalculationMethod | None = None,
        asr_convention: AsrConvention | None = None,
    ) -> None:
        """Hesaplama metodunu ve/veya ikindi kuralını güncelle."""
        if method is not None:
            self._method = method
        if asr_convention is not None:
            self._asr_convention = asr_convention

    def update_jamaat_rules(self, rules: JamaatRuleSet) -> None:
        """Cemaat kurallarını güncelle."""
        self._jamaat_rules = rules

    def _localize(self, now: datetime | None) -> datetime:
        """Zamanı konumun timezone'una çevir; naive değerler yerel kabul edilir."""
        if now is None:
            return datetime.now(self.timezone)
        if now.tzinfo is None:
            return now.replace(tzinfo=self.timezone)
        return now.astimezone(self.timezone)

    def calculate(self, target_date: date) -> PrayerTimes:
        """Belirtilen tarih için namaz vakitlerini hesapla."""
        return calculate(
            target_date,
            self._location.latitude,
            self._location.longitude,
            self.timezone,
            self._method,
            self._asr_convention,
        )

    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimes]:
        """Belirtilen tarihten itibaren n gün için vakitleri hesapla."""
        return [self.calculate(start_date + timedelta(days=i)) for i in range(days)]

    def compute_jamaat(self, target_date: date) -> JamaatTimes:
        """Belirtilen tarih için cemaat saatlerini hesapla."""
        return compute_jamaat(target_date, self.calculate(target_date), self._jamaat_rules)

    def daily_schedule(self, target_date: date) -> DaySchedule:
        """Başlangıç vakitleri ve cemaat saatleri birlikte."""
        times = self.calculate(target_date)
        jamaat = compute_jamaat(target_date, times, self._jamaat_rules)
        return DaySchedule(times=times, jamaat=jamaat)

    def get_current_prayer(self, now: datetime | None = None) -> str:
        """Şu anki vaktin adını döndür (ör. "asr")."""
        now = self._localize(now)

        today_times = self.calculate(now.date())

        # Sondan başa kontrol et
        for name, start in reversed(today_times.items()):
            if now >= start:
                return name

        # Gece yarısından sonra, imsaktan önce hâlâ yatsı
        return "isha"

    def get_next_prayer(self, now: datetime | None = None) -> ScheduleEntry:
        """Sonraki vakti (varsa cemaat saatiyle) döndür."""
        now = self._localize(now)

        for entry in self.daily_schedule(now.date()).entries():
            if now < entry.start:
                return entry

        # Yarının ilk vakti (imsak)
        return self.daily_schedule(now.date() + timedelta(days=1)).entries()[0]

    def get_time_until_next_prayer(self, now: datetime | None = None) -> timedelta:
        """Sonraki vakte kalan süre."""
        now = self._localize(now)

        return self.get_next_prayer(now).start - now
