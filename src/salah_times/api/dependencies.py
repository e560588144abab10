"""Application state and dependencies."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from fastapi import Request

from salah_times.domain.models import GeoLocation
from salah_times.domain.settings import AppSettings
from salah_times.infrastructure.city_directory import StaticCityResolver
from salah_times.infrastructure.settings_repository import JsonSettingsRepository
from salah_times.services.prayer_service import PrayerService


@dataclass
class AppState:
    """Application state container."""

    settings: AppSettings
    settings_repository: JsonSettingsRepository
    resolver: StaticCityResolver
    prayer_service: PrayerService
    started_at: datetime


def resolve_location(settings: AppSettings, resolver: StaticCityResolver) -> GeoLocation:
    """Ayarlardaki konumu, yoksa şehir etiketini çözümle."""
    if settings.location is not None:
        return settings.location
    return resolver.resolve(settings.city)


def build_prayer_service(settings: AppSettings, resolver: StaticCityResolver) -> PrayerService:
    """Ayarlardan PrayerService oluştur."""
    return PrayerService(
        location=resolve_location(settings, resolver),
        method=settings.method,
        asr_convention=settings.asr_convention,
        jamaat_rules=settings.jamaat_rules,
    )


async def initialize_app_state(
    settings_path: Path | None = None,
    default_timezone: str = "UTC",
) -> AppState:
    """
    Initialize application state.

    Args:
        settings_path: Ayar dosyası yolu
        default_timezone: Şehir bulunamazsa kullanılacak timezone

    Returns:
        Initialized AppState
    """
    settings_repo = JsonSettingsRepository(settings_path)
    settings = await settings_repo.load()
    resolver = StaticCityResolver(fallback_timezone=default_timezone)

    return AppState(
        settings=settings,
        settings_repository=settings_repo,
        resolver=resolver,
        prayer_service=build_prayer_service(settings, resolver),
        started_at=datetime.now(),
    )


def get_app_state(request: Request) -> AppState:
    """Get current application state."""
    state = getattr(request.app.state, "salah", None)
    if state is None:
        raise RuntimeError("Application state not initialized")
    return state
