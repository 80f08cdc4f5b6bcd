# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sun Events

Track the sun for a fixed location and publish its daily phases
(astronomical/nautical/civil dawn, sunrise, solar noon, sunset, the dusk
phases and night) to an MQTT broker as they happen, together with the
raw sun altitude as telemetry. Solar noon is predicted at sunrise with
the NOAA equation-of-time approximation and fired once.
"""

from sun_events.domain.phases import SolarPhase, classify
from sun_events.domain.solar_noon import (
    equation_of_time_minutes,
    julian_century,
    julian_day,
    predict_solar_noon,
    solar_noon_utc,
)
from sun_events.domain.observation import GeoPoint, SunObservation, observe_sun, sun_altitude_deg
from sun_events.monitor import LoopState, PhaseSample, SolarPhaseMonitor, preview_day
from sun_events.ports import AltitudeProvider, EventSink, PublishError

__version__ = "1.0.0"

__all__ = [
    "SolarPhase",
    "classify",
    "equation_of_time_minutes",
    "julian_century",
    "julian_day",
    "predict_solar_noon",
    "solar_noon_utc",
    "GeoPoint",
    "SunObservation",
    "observe_sun",
    "sun_altitude_deg",
    "LoopState",
    "PhaseSample",
    "SolarPhaseMonitor",
    "preview_day",
    "AltitudeProvider",
    "EventSink",
    "PublishError",
]
