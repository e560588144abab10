"""Approximate solar geometry used by the prayer time calculator.

The formulas are the low-precision solar coordinates commonly used by prayer
time calculators (accurate to about a minute between 1950 and 2050), not a
full ephemeris.
"""

import logging
import math
from datetime import date

logger = logging.getLogger(__name__)

J2000 = 2451545.0

# Refraction + solar semi-diameter
SUNRISE_DEPRESSION = 0.833


def fix_angle(a: float) -> float:
    """Açıyı [0, 360) aralığına getir."""
    return a % 360.0


def fix_hour(h: float) -> float:
    """Saati [0, 24) aralığına getir."""
    return h % 24.0


def sin_deg(d: float) -> float:
    return math.sin(math.radians(d))


def cos_deg(d: float) -> float:
    return math.cos(math.radians(d))


def tan_deg(d: float) -> float:
    return math.tan(math.radians(d))


def asin_deg(x: float) -> float:
    return math.degrees(math.asin(x))


def acos_deg(x: float) -> float:
    return math.degrees(math.acos(x))


def julian_day(day: date) -> float:
    """Gregoryen takvim tarihinin 00:00 UTC anındaki Jülyen günü."""
    y, m, d = day.year, day.month, day.day
    if m <= 2:
        y -= 1
        m += 12
    a = math.floor(y / 100.0)
    b = 2 - a + math.floor(a / 4.0)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + d + b - 1524.5


def sun_position(jd: float) -> tuple[float, float]:
    """
    Güneşin deklinasyonu ve zaman denklemi.

    Args:
        jd: Jülyen günü

    Returns:
        (deklinasyon derece, zaman denklemi saat [0, 24))
    """
    d = jd - J2000
    g = fix_angle(357.529 + 0.98560028 * d)  # mean anomaly
    q = fix_angle(280.459 + 0.98564736 * d)  # mean longitude
    lon = fix_angle(q + 1.915 * sin_deg(g) + 0.020 * sin_deg(2.0 * g))  # true longitude
    e = 23.439 - 0.00000036 * d  # obliquity of the ecliptic

    declination = asin_deg(sin_deg(e) * sin_deg(lon))
    ra = math.degrees(math.atan2(cos_deg(e) * sin_deg(lon), cos_deg(lon)))
    equation_of_time = fix_hour(q / 15.0 - fix_angle(ra) / 15.0)
    return declination, equation_of_time


def _clamped_acos_hours(x: float) -> float:
    if x > 1.0 or x < -1.0:
        logger.debug(f"Saat açısı kosinüsü sınıra sabitlendi: {x:.4f}")
        x = max(-1.0, min(1.0, x))
    return acos_deg(x) / 15.0


def hour_angle(depression: float, latitude: float, declination: float) -> float:
    """
    Güneşin ufkun ``depression`` derece altına indiği saat açısı.

    Kutup bölgelerinde kosinüs argümanı [-1, 1] dışına çıkarsa sınıra
    sabitlenir; sonuç 0 veya 12 saat olur.

    Returns:
        Öğleden uzaklık (saat)
    """
    altitude = -depression
    num = sin_deg(altitude) - sin_deg(latitude) * sin_deg(declination)
    den = cos_deg(latitude) * cos_deg(declination)
    return _clamped_acos_hours(num / den)


def asr_hour_angle(shadow_factor: float, latitude: float, declination: float) -> float:
    """Gölge boyu kuralına göre ikindi saat açısı (saat)."""
    altitude = math.degrees(math.atan(1.0 / (shadow_factor + tan_deg(abs(latitude - declination)))))
    num = sin_deg(altitude) - sin_deg(latitude) * sin_deg(declination)
    den = cos_deg(latitude) * cos_deg(declination)
    return _clamped_acos_hours(num / den)
