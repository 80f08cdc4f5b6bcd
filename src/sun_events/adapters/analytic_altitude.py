# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytic altitude adapter.

Implements the AltitudeProvider port with the in-package low-precision
solar ephemeris; no network and no ephemeris files.
"""
from datetime import datetime, timezone

from sun_events.domain.observation import GeoPoint, sun_altitude_deg
from sun_events.ports.altitude import AltitudeProvider


class AnalyticAltitudeProvider(AltitudeProvider):
    """Sun altitude from the Meeus low-precision solar ephemeris."""

    def altitude_deg(self, timestamp_ms: int, lat_deg: float, lon_deg: float) -> float:
        epoch = datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)
        return sun_altitude_deg(GeoPoint(lat_deg=lat_deg, lon_deg=lon_deg), epoch)
