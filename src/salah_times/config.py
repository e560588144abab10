"""Configuration management.

Every setting can be overridden with a ``SALAH_TIMES_*`` environment
variable; command-line flags in turn override the environment.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

ENV_PREFIX = "SALAH_TIMES_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_default_settings_path() -> Path:
    """Get default settings path."""
    return Path.home() / ".config" / "salah-times" / "settings.json"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass
class AppConfig:
    """Application configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    settings_path: Path = field(default_factory=_get_default_settings_path)

    # Şehir bulunamadığında kullanılacak timezone
    default_timezone: str = "UTC"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Geçersiz log seviyesi: {self.log_level}")
        if not 0 < self.port < 65536:
            raise ValueError(f"Geçersiz port: {self.port}")
        try:
            ZoneInfo(self.default_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Bilinmeyen timezone: {self.default_timezone}") from e

    @classmethod
    def from_env(cls) -> Self:
        """Load configuration from environment variables."""
        port = _env("PORT", "8080")
        try:
            port_number = int(port)
        except ValueError as e:
            raise ValueError(f"Geçersiz port: {port}") from e

        return cls(
            host=_env("HOST", "0.0.0.0"),
            port=port_number,
            log_level=_env("LOG_LEVEL", "INFO"),
            settings_path=Path(_env("SETTINGS_PATH", str(_get_default_settings_path()))),
            default_timezone=_env("DEFAULT_TIMEZONE", "UTC"),
        )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def setup_logging(level: str = "INFO") -> None:
    """Setup application logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
