"""JSON-based settings repository.

Jamaat rules are stored in their single-line form so the file stays easy to
edit by hand::

    {
      "city": "Makkah, Saudi Arabia",
      "location": null,
      "method": "mwl",
      "asr_convention": "standard",
      "jamaat_rules": "Fajr:O:20|Dhuhr:O:10|...|Jumuah:F:1,30,PM",
      "locale": "en"
    }
"""

import json
import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from salah_times.domain.settings import AppSettings
from salah_times.services.ports import SettingsRepositoryPort

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "salah-times" / "settings.json"

DEFAULT_CITY = "Makkah, Saudi Arabia"


class JsonSettingsRepository(SettingsRepositoryPort):
    """AppSettings'i JSON dosyasında saklayan repository."""

    def __init__(self, file_path: Path | None = None, default_city: str = DEFAULT_CITY) -> None:
        """
        Initialize repository.

        Args:
            file_path: Ayar dosyası yolu (varsayılan: ~/.config/salah-times/settings.json)
            default_city: Dosya yoksa veya bozuksa kullanılacak şehir
        """
        self._file_path = Path(file_path) if file_path else DEFAULT_SETTINGS_PATH
        self._default_city = default_city

    @property
    def file_path(self) -> Path:
        """Ayar dosyası yolu."""
        return self._file_path

    def defaults(self) -> AppSettings:
        """Varsayılan ayarlar."""
        return AppSettings(city=self._default_city)

    async def exists(self) -> bool:
        """Ayar dosyası var mı?"""
        return await aiofiles.os.path.exists(self._file_path)

    async def load(self) -> AppSettings:
        """Ayarları yükle. Dosya okunamazsa varsayılanlara döner."""
        if not await self.exists():
            logger.info("Ayar dosyası bulunamadı, varsayılan ayarlar kullanılıyor.")
            return self.defaults()

        try:
            async with aiofiles.open(self._file_path, encoding="utf-8") as f:
                data = json.loads(await f.read())
        except json.JSONDecodeError as e:
            logger.error(f"Ayar dosyası geçersiz JSON: {e}")
            return self.defaults()
        except OSError as e:
            logger.error(f"Ayar dosyası okunamadı: {e}")
            return self.defaults()

        if not isinstance(data, dict):
            logger.error(f"Ayar dosyası bir JSON nesnesi değil: {self._file_path}")
            return self.defaults()

        try:
            settings = AppSettings.from_dict(data)
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Ayarlar yüklenirken hata: {e}")
            return self.defaults()

        logger.info(f"Ayarlar yüklendi: {self._file_path}")
        return settings

    async def save(self, settings: AppSettings) -> None:
        """Ayarları geçici dosyaya yazıp yerine taşıyarak kaydet."""
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        content = json.dumps(settings.to_dict(), ensure_ascii=False, indent=2)

        try:
            await aiofiles.os.makedirs(self._file_path.parent, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(content)
            await aiofiles.os.replace(tmp_path, self._file_path)
        except OSError as e:
            logger.error(f"Ayarlar kaydedilirken hata: {e}")
            raise

        logger.info(f"Ayarlar kaydedildi: {self._file_path}")

    async def delete(self) -> bool:
        """Ayar dosyasını sil."""
        if not await self.exists():
            return False
        await aiofiles.os.remove(self._file_path)
        logger.info(f"Ayar dosyası silindi: {self._file_path}")
        return True
