"""Offline city directory and coordinate timezone lookup."""

import logging

from timezonefinder import TimezoneFinder

from salah_times.domain.models import GeoLocation
from salah_times.services.ports import LocationResolverPort

logger = logging.getLogger(__name__)

# "City, Country" -> (enlem, boylam, timezone)
CITIES: dict[str, tuple[float, float, str]] = {
    "Karachi, Pakistan": (24.8607, 67.0011, "Asia/Karachi"),
    "Lahore, Pakistan": (31.5204, 74.3587, "Asia/Karachi"),
    "Islamabad, Pakistan": (33.6844, 73.0479, "Asia/Karachi"),
    "Riyadh, Saudi Arabia": (24.7136, 46.6753, "Asia/Riyadh"),
    "Makkah, Saudi Arabia": (21.3891, 39.8579, "Asia/Riyadh"),
    "Madinah, Saudi Arabia": (24.5247, 39.5692, "Asia/Riyadh"),
    "Dubai, United Arab Emirates": (25.2048, 55.2708, "Asia/Dubai"),
    "Doha, Qatar": (25.2854, 51.5310, "Asia/Qatar"),
    "Istanbul, Türkiye": (41.0082, 28.9784, "Europe/Istanbul"),
    "Cairo, Egypt": (30.0444, 31.2357, "Africa/Cairo"),
    "Jakarta, Indonesia": (-6.2088, 106.8456, "Asia/Jakarta"),
    "Kuala Lumpur, Malaysia": (3.1390, 101.6869, "Asia/Kuala_Lumpur"),
    "London, United Kingdom": (51.5074, -0.1278, "Europe/London"),
    "New York, United States": (40.7128, -74.0060, "America/New_York"),
    "Toronto, Canada": (43.6532, -79.3832, "America/Toronto"),
}


class StaticCityResolver(LocationResolverPort):
    """Sabit tablodan şehir çözümleyici."""

    def __init__(
        self,
        fallback_timezone: str = "UTC",
        cities: dict[str, tuple[float, float, str]] | None = None,
    ) -> None:
        """
        Initialize resolver.

        Args:
            fallback_timezone: Şehir bulunamazsa kullanılacak timezone
            cities: Şehir tablosu (varsayılan: CITIES)
        """
        self._fallback_timezone = fallback_timezone
        self._cities = cities if cities is not None else CITIES
        self._tzf: TimezoneFinder | None = None

    @property
    def fallback_timezone(self) -> str:
        return self._fallback_timezone

    def _location(self, label: str) -> GeoLocation:
        lat, lng, tz = self._cities[label]
        return GeoLocation(latitude=lat, longitude=lng, timezone=tz, label=label)

    def resolve(self, label: str) -> GeoLocation:
        """
        Şehir etiketinden konum bul.

        Önce birebir eşleşme, sonra büyük/küçük harf duyarsız kısmi eşleşme
        ("Karachi" veya "Pakistan" gibi) denenir. Hiçbiri tutmazsa (0, 0)
        ve varsayılan timezone döner.
        """
        cleaned = label.strip()
        if cleaned in self._cities:
            return self._location(cleaned)

        if cleaned:
            needle = cleaned.lower()
            for key in self._cities:
                lowered = key.lower()
                if lowered.startswith(needle) or f", {needle}" in lowered:
                    return self._location(key)

        logger.warning(
            f"Şehir bulunamadı: {label!r}, (0, 0) {self._fallback_timezone} kullanılıyor."
        )
        return GeoLocation(latitude=0.0, longitude=0.0, timezone=self._fallback_timezone)

    def resolve_coordinates(self, latitude: float, longitude: float) -> GeoLocation:
        """Koordinatlar için timezone bularak konum oluştur."""
        if self._tzf is None:
            self._tzf = TimezoneFinder()
        tz_name = self._tzf.timezone_at(lat=latitude, lng=longitude)
        if tz_name is None:
            logger.warning(
                f"Timezone bulunamadı ({latitude}, {longitude}), "
                f"{self._fallback_timezone} kullanılıyor."
            )
            tz_name = self._fallback_timezone
        return GeoLocation(latitude=latitude, longitude=longitude, timezone=tz_name)

    def search(self, query: str = "") -> list[str]:
        """Sorguyu içeren şehir etiketlerini listele."""
        needle = query.strip().lower()
        return sorted(key for key in self._cities if needle in key.lower())
