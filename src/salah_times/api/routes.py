"""API Routes."""

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Annotated

from babel import Locale, UnknownLocaleError
from babel.dates import format_date
from fastapi import APIRouter, Depends, HTTPException, Query, status

from salah_times.api.dependencies import AppState, build_prayer_service, get_app_state
from salah_times.api.schemas import (
    ApiResponse,
    DayScheduleSchema,
    FixedRuleSchema,
    JamaatRulesSchema,
    JamaatRulesUpdateSchema,
    LocationSchema,
    MethodSchema,
    NextPrayerSchema,
    OffsetRuleSchema,
    PrayerTimesSchema,
    ScheduleEntrySchema,
    SettingsSchema,
    SettingsUpdateSchema,
)
from salah_times.domain.models import (
    AsrConvention,
    CalculationMethod,
    DaySchedule,
    GeoLocation,
    IshaAngle,
    Prayer,
)
from salah_times.domain.rules import FixedRule, JamaatRule, JamaatRuleSet, OffsetRule
from salah_times.domain.settings import AppSettings
from salah_times.services.prayer_calculator import calculate

router = APIRouter()

StateDep = Annotated[AppState, Depends(get_app_state)]


def _format_timedelta(td: timedelta) -> str:
    """Timedelta'yı okunabilir formata çevir."""
    total_seconds = int(td.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _hhmm(value: datetime | None) -> str | None:
    return value.strftime("%H:%M") if value is not None else None


def _schedule_schema(schedule: DaySchedule, locale: str) -> DayScheduleSchema:
    return DayScheduleSchema(
        date=schedule.date,
        date_formatted=format_date(schedule.date, "EEEE, d MMMM y", locale=locale),
        is_friday=schedule.is_friday,
        entries=[
            ScheduleEntrySchema(
                name=entry.name,
                display_name=entry.display_name,
                start=entry.start.strftime("%H:%M"),
                jamaat=_hhmm(entry.jamaat),
            )
            for entry in schedule.entries()
        ],
    )


def _rule_to_schema(rule: JamaatRule) -> OffsetRuleSchema | FixedRuleSchema:
    if isinstance(rule, OffsetRule):
        return OffsetRuleSchema(minutes=rule.minutes)
    return FixedRuleSchema(hour12=rule.hour12, minute=rule.minute, is_pm=rule.is_pm)


def _rule_from_schema(schema: OffsetRuleSchema | FixedRuleSchema) -> JamaatRule:
    if isinstance(schema, OffsetRuleSchema):
        return OffsetRule(schema.minutes)
    return FixedRule(hour12=schema.hour12, minute=schema.minute, is_pm=schema.is_pm)


def _rules_schema(rules: JamaatRuleSet) -> JamaatRulesSchema:
    return JamaatRulesSchema(
        rules={prayer: _rule_to_schema(rules.get(prayer)) for prayer in Prayer},
        line=rules.format(),
    )


def _validate_locale(locale: str) -> None:
    try:
        Locale.parse(locale)
    except (UnknownLocaleError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Bilinmeyen dil: {locale}",
        ) from e


async def _apply_settings(state: AppState, new_settings: AppSettings) -> None:
    """Ayarları kaydet; kayıt başarılıysa uygula."""
    service = build_prayer_service(new_settings, state.resolver)
    await state.settings_repository.save(new_settings)
    state.settings = new_settings
    state.prayer_service = service


# ============== Calculation ==============


@router.get("/calculate", response_model=PrayerTimesSchema)
async def calculate_times(
    state: StateDep,
    latitude: Annotated[float, Query(ge=-90, le=90)],
    longitude: Annotated[float, Query(ge=-180, le=180)],
    target_date: Annotated[date | None, Query(alias="date")] = None,
    timezone: str | None = None,
    method: CalculationMethod = CalculationMethod.MWL,
    asr: AsrConvention = AsrConvention.STANDARD,
) -> PrayerTimesSchema:
    """Verilen konum ve tarih için vakitleri hesapla (ayarlardan bağımsız)."""
    if timezone is None:
        location = state.resolver.resolve_coordinates(latitude, longitude)
    else:
        try:
            location = GeoLocation(latitude=latitude, longitude=longitude, timezone=timezone)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    day = target_date or datetime.now(location.tzinfo).date()
    times = calculate(day, location.latitude, location.longitude, location.tzinfo, method, asr)

    return PrayerTimesSchema(
        date=day,
        timezone=location.timezone,
        method=method,
        asr_convention=asr,
        **{name: value.strftime("%H:%M") for name, value in times.items()},
    )


# ============== Prayer Times ==============


@router.get("/times/today", response_model=DayScheduleSchema)
async def get_today_times(state: StateDep) -> DayScheduleSchema:
    """Bugünün vakitlerini ve cemaat saatlerini getir."""
    service = state.prayer_service
    today = datetime.now(service.timezone).date()
    return _schedule_schema(service.daily_schedule(today), state.settings.locale)


@router.get("/times/week", response_model=list[DayScheduleSchema])
async def get_week_times(state: StateDep) -> list[DayScheduleSchema]:
    """Haftalık vakitleri getir."""
    service = state.prayer_service
    today = datetime.now(service.timezone).date()
    return [
        _schedule_schema(service.daily_schedule(today + timedelta(days=i)), state.settings.locale)
        for i in range(7)
    ]


@router.get("/times/{target_date}", response_model=DayScheduleSchema)
async def get_times_for_date(target_date: date, state: StateDep) -> DayScheduleSchema:
    """Belirli bir günün vakitlerini getir."""
    schedule = state.prayer_service.daily_schedule(target_date)
    return _schedule_schema(schedule, state.settings.locale)


@router.get("/next", response_model=NextPrayerSchema)
async def get_next_prayer(state: StateDep) -> NextPrayerSchema:
    """Mevcut ve sonraki vakit, geri sayım."""
    service = state.prayer_service
    now = datetime.now(service.timezone)
    next_entry = service.get_next_prayer(now)

    return NextPrayerSchema(
        current_time=now.strftime("%H:%M:%S"),
        current_prayer=service.get_current_prayer(now),
        next_prayer=next_entry.name,
        next_prayer_time=next_entry.start.strftime("%H:%M"),
        next_jamaat_time=_hhmm(next_entry.jamaat),
        countdown=_format_timedelta(next_entry.start - now),
    )


# ============== Settings ==============


@router.get("/settings", response_model=SettingsSchema)
async def get_settings(state: StateDep) -> SettingsSchema:
    """Mevcut ayarları getir."""
    s = state.settings
    location = state.prayer_service.location
    return SettingsSchema(
        city=s.city,
        location=LocationSchema(
            latitude=location.latitude,
            longitude=location.longitude,
            timezone=location.timezone,
            label=location.label,
        ),
        method=s.method,
        asr_convention=s.asr_convention,
        jamaat_rules=s.jamaat_rules.format(),
        locale=s.locale,
    )


@router.put("/settings", response_model=ApiResponse)
async def update_settings(update: SettingsUpdateSchema, state: StateDep) -> ApiResponse:
    """Ayarları güncelle."""
    current = state.settings

    new_location = current.location
    if update.location:
        try:
            new_location = GeoLocation(
                latitude=update.location.latitude,
                longitude=update.location.longitude,
                timezone=update.location.timezone,
                label=update.location.label,
            )
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    elif update.city is not None:
        # Şehir seçildiyse elle girilmiş koordinatlar geçersiz olur
        new_location = None

    if update.locale is not None:
        _validate_locale(update.locale)

    new_settings = replace(
        current,
        city=update.city if update.city is not None else current.city,
        location=new_location,
        method=update.method or current.method,
        asr_convention=update.asr_convention or current.asr_convention,
        locale=update.locale or current.locale,
    )
    await _apply_settings(state, new_settings)

    return ApiResponse(success=True, message="Ayarlar güncellendi.")


@router.get("/jamaat/rules", response_model=JamaatRulesSchema)
async def get_jamaat_rules(state: StateDep) -> JamaatRulesSchema:
    """Cemaat kurallarını getir."""
    return _rules_schema(state.settings.jamaat_rules)


@router.put("/jamaat/rules", response_model=JamaatRulesSchema)
async def update_jamaat_rules(
    update: JamaatRulesUpdateSchema, state: StateDep
) -> JamaatRulesSchema:
    """Cemaat kurallarını güncelle.

    Yapılandırılmış kurallar verilmişse satır formatı yok sayılır.
    """
    if update.rules is not None:
        rules = state.settings.jamaat_rules
        for prayer, schema in update.rules.items():
            rules = rules.with_rule(prayer, _rule_from_schema(schema))
    elif update.line is not None:
        rules = JamaatRuleSet.parse(update.line)
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="rules veya line alanlarından biri gerekli.",
        )

    await _apply_settings(state, replace(state.settings, jamaat_rules=rules))
    return _rules_schema(rules)


# ============== Utility ==============


@router.get("/cities")
async def get_cities(state: StateDep, q: str = "") -> list[str]:
    """Şehir listesini getir."""
    return state.resolver.search(q)


@router.get("/methods", response_model=list[MethodSchema])
async def get_methods() -> list[MethodSchema]:
    """Hesaplama metotlarını listele."""
    result = []
    for method in CalculationMethod:
        isha = method.isha
        result.append(
            MethodSchema(
                value=method,
                display_name=method.display_name,
                fajr_angle=method.fajr_angle,
                isha_angle=isha.degrees if isinstance(isha, IshaAngle) else None,
                isha_interval_minutes=None if isinstance(isha, IshaAngle) else isha.minutes,
            )
        )
    return result


@router.get("/prayers")
async def get_prayer_names() -> list[dict[str, str]]:
    """Namaz isimlerini listele."""
    return [{"value": p.value, "display_name": p.display_name} for p in Prayer]
