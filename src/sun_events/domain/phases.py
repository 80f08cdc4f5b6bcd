# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar phase classification.

Maps a solar altitude angle and a morning/evening flag to one of the
named phases of the sun's daily cycle. Band edges sit on whole degrees:
the altitude is truncated toward zero before bucketing, so -0.9° is
treated as 0° (sunrise/sunset), not as civil twilight.

No external dependencies — only stdlib math/enum.
"""
import math
from enum import Enum


class SolarPhase(Enum):
    """Named segment of the sun's daily altitude cycle.

    The value is the identifier sent on the wire.
    """
    NIGHT = "night"
    ASTRONOMICAL_DAWN = "astronomicalDawn"
    NAUTICAL_DAWN = "nauticalDawn"
    CIVIL_DAWN = "civilDawn"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    CIVIL_DUSK = "civilDusk"
    NAUTICAL_DUSK = "nauticalDusk"
    ASTRONOMICAL_DUSK = "astronomicalDusk"
    SOLAR_NOON = "solarNoon"

    @property
    def wire_name(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, name: str) -> "SolarPhase":
        """Parse a wire identifier such as ``"civilDawn"``."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown solar phase identifier: {name!r}") from None

    def __str__(self) -> str:
        return self.value


# (lowest whole degree, highest whole degree, morning phase, evening phase)
_BANDS: tuple[tuple[int, int, SolarPhase, SolarPhase], ...] = (
    (-18, -13, SolarPhase.ASTRONOMICAL_DAWN, SolarPhase.ASTRONOMICAL_DUSK),
    (-12, -7, SolarPhase.NAUTICAL_DAWN, SolarPhase.NAUTICAL_DUSK),
    (-6, -1, SolarPhase.CIVIL_DAWN, SolarPhase.CIVIL_DUSK),
    (0, 90, SolarPhase.SUNRISE, SolarPhase.SUNSET),
)


def classify(altitude_deg: float, is_morning: bool) -> SolarPhase:
    """
    Classify a solar altitude into a phase.

    Total over all floats: anything outside [-18, 90] after truncation,
    including NaN and infinities, is NIGHT. SOLAR_NOON is never returned;
    it only comes from the scheduled noon trigger.

    Args:
        altitude_deg: Sun altitude above the horizon in degrees.
        is_morning: Selects the dawn/sunrise family over dusk/sunset.

    Returns:
        The SolarPhase for the truncated altitude.
    """
    if not math.isfinite(altitude_deg):
        return SolarPhase.NIGHT

    degree = math.trunc(altitude_deg)
    for low, high, morning, evening in _BANDS:
        if low <= degree <= high:
            return morning if is_morning else evening
    return SolarPhase.NIGHT
