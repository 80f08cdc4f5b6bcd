# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric sun observation geometry.

Computes the sun's altitude and azimuth as seen from a point on the
ground. Geometric (no refraction, no parallax); the whole-degree phase
bands make both corrections irrelevant.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from sun_events.domain.solar import gmst_rad, sun_position


@dataclass(frozen=True)
class GeoPoint:
    """A fixed geographic observation point."""
    lat_deg: float
    lon_deg: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat_deg <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.lat_deg}")
        if not -180.0 <= self.lon_deg <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.lon_deg}")


@dataclass(frozen=True)
class SunObservation:
    """Topocentric sun direction."""
    altitude_deg: float
    azimuth_deg: float


def observe_sun(point: GeoPoint, epoch: datetime) -> SunObservation:
    """
    Sun altitude and azimuth from a ground point.

    Args:
        point: Observer location.
        epoch: UTC datetime.

    Returns:
        SunObservation with altitude in [-90, 90] and azimuth in [0, 360),
        azimuth measured from north through east.
    """
    sun = sun_position(epoch)
    lat_rad = math.radians(point.lat_deg)
    hour_angle = gmst_rad(epoch) + math.radians(point.lon_deg) - sun.right_ascension_rad

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    sin_dec = math.sin(sun.declination_rad)
    cos_dec = math.cos(sun.declination_rad)

    sin_alt = sin_lat * sin_dec + cos_lat * cos_dec * math.cos(hour_angle)
    altitude_rad = math.asin(max(-1.0, min(1.0, sin_alt)))

    # East-North components of the sun direction
    east = -cos_dec * math.sin(hour_angle)
    north = cos_lat * sin_dec - sin_lat * cos_dec * math.cos(hour_angle)
    azimuth_deg = math.degrees(math.atan2(east, north)) % 360.0

    return SunObservation(
        altitude_deg=math.degrees(altitude_rad),
        azimuth_deg=azimuth_deg,
    )


def sun_altitude_deg(point: GeoPoint, epoch: datetime) -> float:
    """Sun altitude in degrees. Convenience wrapper."""
    return observe_sun(point, epoch).altitude_deg
