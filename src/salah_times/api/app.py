"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salah_times import __version__
from salah_times.api.dependencies import AppState, initialize_app_state
from salah_times.api.routes import router as api_router

logger = logging.getLogger(__name__)


def _describe(state: AppState) -> str:
    location = state.prayer_service.location
    name = location.label or state.settings.city or "-"
    return (
        f"{name} ({location.latitude}, {location.longitude}) {location.timezone}, "
        f"{state.prayer_service.method.value}/{state.prayer_service.asr_convention.value}"
    )


def _make_lifespan(
    settings_path: Path | None, default_timezone: str
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Uygulama durumunu başlat ve kapanışta bırak."""
        logger.info("Salah Times başlatılıyor...")
        app.state.salah = await initialize_app_state(
            settings_path=settings_path,
            default_timezone=default_timezone,
        )
        logger.info(f"Konum: {_describe(app.state.salah)}")

        yield

        app.state.salah = None
        logger.info("Salah Times kapatıldı.")

    return lifespan


def create_app(
    settings_path: Path | None = None,
    default_timezone: str = "UTC",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        settings_path: Ayar dosyası yolu
        default_timezone: Şehir bulunamazsa kullanılacak timezone

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Salah Times",
        description="Namaz vakitleri ve cemaat saatleri",
        version=__version__,
        lifespan=_make_lifespan(settings_path, default_timezone),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "PUT"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
