# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris.

Low-precision Sun position using Meeus "Astronomical Algorithms" Ch. 25
(geometric longitude with equation of center). Accuracy ~0.01°, well
inside the whole-degree bands used for phase classification.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

# J2000.0 reference epoch
_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@dataclass(frozen=True)
class SunPosition:
    """Apparent equatorial Sun position at a given epoch."""
    right_ascension_rad: float
    declination_rad: float
    distance_au: float


def _as_utc(epoch: datetime) -> datetime:
    if epoch.tzinfo is None:
        return epoch.replace(tzinfo=timezone.utc)
    return epoch


def days_since_j2000(epoch: datetime) -> float:
    """Days (fractional) since J2000.0 (2000-01-01 12:00:00 UTC)."""
    return (_as_utc(epoch) - _J2000).total_seconds() / 86400.0


def julian_centuries_j2000(epoch: datetime) -> float:
    """Julian centuries since J2000.0."""
    return days_since_j2000(epoch) / 36525.0


def sun_position(epoch: datetime) -> SunPosition:
    """
    Sun right ascension, declination and distance.

    Args:
        epoch: UTC datetime (naive values are taken as UTC).

    Returns:
        SunPosition with RA in [-π, π], Dec in radians, distance in AU.
    """
    T = julian_centuries_j2000(epoch)

    # Geometric mean longitude and mean anomaly (degrees)
    L0_deg = (280.46646 + T * (36000.76983 + 0.0003032 * T)) % 360.0
    M_deg = (357.52911 + T * (35999.05029 - 0.0001537 * T)) % 360.0
    M_rad = float(np.radians(M_deg))
    e = 0.016708634 - T * (0.000042037 + 0.0000001267 * T)

    # Equation of center
    C_deg = (
        (1.914602 - T * (0.004817 + 0.000014 * T)) * float(np.sin(M_rad))
        + (0.019993 - 0.000101 * T) * float(np.sin(2.0 * M_rad))
        + 0.000289 * float(np.sin(3.0 * M_rad))
    )
    true_long_deg = L0_deg + C_deg
    true_anom_rad = float(np.radians(M_deg + C_deg))

    # Apparent longitude (nutation and aberration)
    omega_rad = float(np.radians(125.04 - 1934.136 * T))
    lambda_rad = float(np.radians(true_long_deg - 0.00569 - 0.00478 * float(np.sin(omega_rad))))

    # Obliquity of the ecliptic, corrected
    eps0_deg = 23.0 + (26.0 + (21.448 - T * (46.815 + T * (0.00059 - T * 0.001813))) / 60.0) / 60.0
    eps_rad = float(np.radians(eps0_deg + 0.00256 * float(np.cos(omega_rad))))

    ra_rad = float(np.arctan2(np.cos(eps_rad) * np.sin(lambda_rad), np.cos(lambda_rad)))
    dec_rad = float(np.arcsin(np.sin(eps_rad) * np.sin(lambda_rad)))

    r_au = 1.000001018 * (1.0 - e**2) / (1.0 + e * float(np.cos(true_anom_rad)))

    return SunPosition(
        right_ascension_rad=ra_rad,
        declination_rad=dec_rad,
        distance_au=r_au,
    )


def gmst_rad(epoch: datetime) -> float:
    """
    Greenwich Mean Sidereal Time for a given UTC epoch.

    IAU formula based on Julian centuries from J2000.0:
        GMST(°) = 280.46061837 + 360.98564736629 * (JD - 2451545.0)
                  + 0.000387933 * T² - T³/38710000

    Returns:
        GMST in radians, normalized to [0, 2π).
    """
    d = days_since_j2000(epoch)
    t_centuries = d / 36525.0

    gmst_deg = (
        280.46061837
        + 360.98564736629 * d
        + 0.000387933 * t_centuries**2
        - t_centuries**3 / 38710000.0
    ) % 360.0

    return math.radians(gmst_deg)
