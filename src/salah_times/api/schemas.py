"""Pydantic schemas for API."""

from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from salah_times.domain.models import AsrConvention, CalculationMethod, Prayer


class LocationSchema(BaseModel):
    """Konum şeması."""

    latitude: Annotated[float, Field(ge=-90, le=90, description="Enlem")]
    longitude: Annotated[float, Field(ge=-180, le=180, description="Boylam")]
    timezone: str = Field(default="UTC", description="IANA timezone adı")
    label: str = Field(default="", description="Şehir adı")


class OffsetRuleSchema(BaseModel):
    """Vakitten sonra dakika."""

    type: Literal["offset"] = "offset"
    minutes: Annotated[int, Field(ge=0, le=240)]


class FixedRuleSchema(BaseModel):
    """Sabit saat (12 saat formatı)."""

    type: Literal["fixed"] = "fixed"
    hour12: Annotated[int, Field(ge=1, le=12)]
    minute: Annotated[int, Field(ge=0, le=59)]
    is_pm: bool


JamaatRuleSchema = Annotated[OffsetRuleSchema | FixedRuleSchema, Field(discriminator="type")]


class JamaatRulesSchema(BaseModel):
    """Cemaat kuralları şeması. Eksik namazlar varsayılana döner."""

    rules: dict[Prayer, JamaatRuleSchema] = Field(default_factory=dict)
    line: str = Field(default="", description="Satır formatı")


class JamaatRulesUpdateSchema(BaseModel):
    """Cemaat kuralları güncellemesi: yapılandırılmış kurallar veya satır formatı."""

    rules: dict[Prayer, JamaatRuleSchema] | None = None
    line: str | None = None


class SettingsSchema(BaseModel):
    """Tüm ayarlar şeması."""

    city: str = ""
    location: LocationSchema
    method: CalculationMethod = Field(default=CalculationMethod.MWL)
    asr_convention: AsrConvention = Field(default=AsrConvention.STANDARD)
    jamaat_rules: str = Field(default="", description="Cemaat kuralları (satır formatı)")
    locale: str = "en"


class SettingsUpdateSchema(BaseModel):
    """Ayar güncelleme şeması (partial update)."""

    city: str | None = None
    location: LocationSchema | None = None
    method: CalculationMethod | None = None
    asr_convention: AsrConvention | None = None
    locale: str | None = None


class PrayerTimesSchema(BaseModel):
    """Tek seferlik hesaplama sonucu."""

    date: date
    timezone: str
    method: CalculationMethod
    asr_convention: AsrConvention
    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    maghrib: str
    isha: str


class ScheduleEntrySchema(BaseModel):
    """Tek vakit satırı."""

    name: str
    display_name: str
    start: str  # HH:MM formatında
    jamaat: str | None = None


class DayScheduleSchema(BaseModel):
    """Günlük çizelge şeması."""

    date: date
    date_formatted: str
    is_friday: bool
    entries: list[ScheduleEntrySchema]


class NextPrayerSchema(BaseModel):
    """Sonraki vakit şeması."""

    current_time: str
    current_prayer: str
    next_prayer: str
    next_prayer_time: str
    next_jamaat_time: str | None = None
    countdown: str


class MethodSchema(BaseModel):
    """Hesaplama metodu şeması."""

    value: CalculationMethod
    display_name: str
    fajr_angle: float
    isha_angle: float | None = None
    isha_interval_minutes: int | None = None


class ApiResponse(BaseModel):
    """Genel API yanıt şeması."""

    success: bool
    message: str
    data: dict | list | None = None
