# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for solar altitude sources.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class AltitudeProvider(Protocol):
    """Port for computing the sun's altitude above the horizon."""

    def altitude_deg(self, timestamp_ms: int, lat_deg: float, lon_deg: float) -> float:
        """
        Sun altitude for an instant and a location.

        Must be side-effect free and always return a value.

        Args:
            timestamp_ms: UTC instant as milliseconds since the Unix epoch.
            lat_deg: Observer latitude in degrees.
            lon_deg: Observer longitude in degrees, east positive.

        Returns:
            Altitude in degrees, negative below the horizon.
        """
        ...
