"""Service layer interfaces (ports)."""

from abc import ABC, abstractmethod
from datetime import date

from salah_times.domain.models import GeoLocation, JamaatTimes, PrayerTimes
from salah_times.domain.settings import AppSettings


class PrayerTimeCalculatorPort(ABC):
    """Namaz vakti hesaplama arayüzü (port)."""

    @abstractmethod
    def calculate(self, target_date: date) -> PrayerTimes:
        """Belirtilen tarih için namaz vakitlerini hesapla."""

    @abstractmethod
    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimes]:
        """Belirtilen tarihten itibaren n gün için vakitleri hesapla."""

    @abstractmethod
    def compute_jamaat(self, target_date: date) -> JamaatTimes:
        """Belirtilen tarih için cemaat saatlerini hesapla."""


class LocationResolverPort(ABC):
    """Şehir adı -> konum çözümleme arayüzü."""

    @abstractmethod
    def resolve(self, label: str) -> GeoLocation:
        """Şehir etiketinden konum bul. Bulunamazsa varsayılan konum döner."""

    @abstractmethod
    def resolve_coordinates(self, latitude: float, longitude: float) -> GeoLocation:
        """Koordinatlar için timezone bularak konum oluştur."""

    @abstractmethod
    def search(self, query: str = "") -> list[str]:
        """Sorguyla eşleşen şehir etiketlerini listele."""


class SettingsRepositoryPort(ABC):
    """Ayarlar deposu arayüzü (port)."""

    @abstractmethod
    async def load(self) -> AppSettings:
        """Ayarları yükle."""

    @abstractmethod
    async def save(self, settings: AppSettings) -> None:
        """Ayarları kaydet."""
