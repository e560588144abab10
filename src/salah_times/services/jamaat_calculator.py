"""Jamaat (congregation) time rule engine."""

from datetime import date, datetime

from salah_times.domain.models import FRIDAY, JamaatTimes, Prayer, PrayerTimes
from salah_times.domain.rules import JamaatRuleSet


def compute_jamaat(day: date, start_times: PrayerTimes, rules: JamaatRuleSet) -> JamaatTimes:
    """
    Başlangıç vakitleri ve kurallardan cemaat saatlerini hesapla.

    Sabit saatli kurallar başlangıç vaktini dikkate almaz; cemaatin vakitten
    sonra olması kontrol edilmez. Cuma günü ``dhuhr`` alanı Jumu'ah kuralından
    gelen saatle değiştirilir.

    Args:
        day: Takvim günü
        start_times: ``calculate`` sonucu
        rules: Namaz bazlı kurallar

    Returns:
        Cemaat saatleri
    """

    def apply(prayer: Prayer) -> datetime:
        return rules.get(prayer).apply(day, start_times.start_of(prayer))

    dhuhr = apply(Prayer.DHUHR)
    jumuah = apply(Prayer.JUMUAH) if day.weekday() == FRIDAY else None

    return JamaatTimes(
        date=day,
        fajr=apply(Prayer.FAJR),
        dhuhr=jumuah if jumuah is not None else dhuhr,
        asr=apply(Prayer.ASR),
        maghrib=apply(Prayer.MAGHRIB),
        isha=apply(Prayer.ISHA),
        jumuah=jumuah,
    )
