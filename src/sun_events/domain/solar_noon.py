# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar noon prediction.

NOAA equation-of-time approximation (the spreadsheet algorithm from
gml.noaa.gov/grad/solcalc/calcdetails.html), evaluated at 0h UT of the
calendar date. Accurate to a few seconds for civil use; not an
astronomical-grade ephemeris.

No external dependencies — only stdlib math/datetime.
"""
import math
from datetime import date, datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_JD_J2000 = 2451545.0
_DAYS_PER_CENTURY = 36525.0
_SECONDS_PER_DAY = 86400.0
_MINUTES_PER_DAY = 1440.0


def julian_day(day: date) -> float:
    """
    Julian day number at 0h UT of a proleptic Gregorian calendar date.

    Meeus, "Astronomical Algorithms", ch. 7.

    Args:
        day: Calendar date.

    Returns:
        Julian day (ends in .5 since days start at midnight).
    """
    year, month = day.year, day.month
    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day.day + b - 1524.5
    )


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - _JD_J2000) / _DAYS_PER_CENTURY


def equation_of_time_minutes(t_centuries: float) -> float:
    """
    Equation of time (apparent minus mean solar time) in minutes.

    Args:
        t_centuries: Julian centuries since J2000.0.

    Returns:
        Equation of time in minutes; roughly within [-14.5, +16.5].
    """
    T = t_centuries

    # Geometric mean longitude and mean anomaly of the sun (degrees)
    mean_long = (280.46646 + T * (36000.76983 + T * 0.0003032)) % 360.0
    mean_anom = 357.52911 + T * (35999.05029 - 0.0001537 * T)

    ecc = 0.016708634 - T * (0.000042037 + 0.0000001267 * T)

    # Mean obliquity (deg/min/sec polynomial) plus nutation correction
    obliq_corr = (
        23.0
        + (26.0 + (21.448 - T * (46.815 + T * (0.00059 - T * 0.001813))) / 60.0) / 60.0
        + 0.00256 * math.cos(math.radians(125.04 - 1934.136 * T))
    )

    y = math.tan(math.radians(obliq_corr / 2.0)) ** 2

    l_rad = math.radians(mean_long)
    m_rad = math.radians(mean_anom)

    eq_rad = (
        y * math.sin(2.0 * l_rad)
        - 2.0 * ecc * math.sin(m_rad)
        + 4.0 * ecc * y * math.sin(m_rad) * math.cos(2.0 * l_rad)
        - 0.5 * y**2 * math.sin(4.0 * l_rad)
        - 1.25 * ecc**2 * math.sin(2.0 * m_rad)
    )
    return 4.0 * math.degrees(eq_rad)


def _midnight_epoch_seconds(day: date) -> int:
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return int((midnight - _EPOCH).total_seconds())


def predict_solar_noon(day: date, longitude_deg: float) -> int:
    """
    Predict the UTC instant of solar noon.

    Args:
        day: Calendar date (valid proleptic Gregorian date).
        longitude_deg: Observer longitude in degrees, east positive.

    Returns:
        Solar noon as UTC epoch seconds, rounded to the nearest second.
    """
    t_centuries = julian_century(julian_day(day))
    eq_of_time = equation_of_time_minutes(t_centuries)

    noon_fraction = (720.0 - 4.0 * longitude_deg - eq_of_time) / _MINUTES_PER_DAY

    return round(_midnight_epoch_seconds(day) + noon_fraction * _SECONDS_PER_DAY)


def solar_noon_utc(day: date, longitude_deg: float) -> datetime:
    """predict_solar_noon as an aware UTC datetime."""
    return _EPOCH + timedelta(seconds=predict_solar_noon(day, longitude_deg))
