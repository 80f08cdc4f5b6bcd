# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar phase monitor: the polling loop that turns sun altitudes into events.

Each tick fires a pending solar-noon event if its instant has passed,
samples the sun altitude, publishes it as telemetry on ``sun/info``,
classifies it and publishes the phase on ``sun`` when it differs from the
last one. Reaching sunrise schedules the day's solar-noon event.

Morning vs. evening is decided by the wall-clock hour (hour <= 12 is
morning), so on a clear afternoon the first tick after 13:00 reports
``sunset`` while the sun is still up.
"""
import logging
import math
import time
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Callable

import numpy as np

from sun_events.domain.observation import GeoPoint
from sun_events.domain.phases import SolarPhase, classify
from sun_events.domain.solar_noon import predict_solar_noon
from sun_events.ports.altitude import AltitudeProvider
from sun_events.ports.events import SUN_INFO_TOPIC, SUN_TOPIC, EventSink, PublishError

_log = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_S = 60.0


@dataclass
class LoopState:
    """Mutable state of the monitor loop. Owned by a single monitor."""
    last_published_phase: SolarPhase | None = None
    pending_noon_instant: int | None = None  # UTC epoch seconds


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _format_altitude(altitude: float) -> str:
    """Decimal notation without exponent, e.g. 3.2e-05 -> '0.000032'."""
    return np.format_float_positional(altitude, trim='0')


def _is_morning(now: datetime) -> bool:
    return now.hour <= 12


def _timestamp_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


class SolarPhaseMonitor:
    """
    Polls the sun altitude and publishes phase transitions.

    Args:
        point: Observer location.
        altitude_provider: Source of sun altitudes.
        event_sink: Destination for telemetry and phase events.
        state: Loop state to resume from; a fresh LoopState by default.
        clock: Returns the current time as an aware local datetime.
        sleep: Called with poll_interval_s between idle ticks.
        poll_interval_s: Pause after a tick without a transition.
    """

    def __init__(
        self,
        point: GeoPoint,
        altitude_provider: AltitudeProvider,
        event_sink: EventSink,
        state: LoopState | None = None,
        clock: Callable[[], datetime] = _local_now,
        sleep: Callable[[float], None] = time.sleep,
        poll_interval_s: float = DEFAULT_POLL_INTERVAL_S,
    ):
        self.point = point
        self.state = state if state is not None else LoopState()
        self._altitude_provider = altitude_provider
        self._sink = event_sink
        self._clock = clock
        self._sleep = sleep
        self._poll_interval_s = poll_interval_s

    def tick(self) -> bool:
        """
        Run one iteration of the loop.

        Returns:
            True if a phase transition was published (the caller should
            tick again without sleeping), False otherwise.
        """
        try:
            now = self._clock()
        except (OSError, OverflowError, ValueError) as e:
            _log.error("Could not read the current time, skipping tick: %s", e)
            return False

        self._fire_noon_if_due(now)

        try:
            altitude = self._altitude_provider.altitude_deg(
                _timestamp_ms(now), self.point.lat_deg, self.point.lon_deg,
            )
        except (ArithmeticError, ValueError) as e:
            _log.error("Could not compute the sun altitude, skipping tick: %s", e)
            return False

        self._publish(SUN_INFO_TOPIC, _format_altitude(altitude))

        phase = classify(altitude, _is_morning(now))
        if phase == self.state.last_published_phase:
            return False

        _log.info("Reached %s", phase.name)
        self._publish(SUN_TOPIC, phase.wire_name)
        self.state.last_published_phase = phase

        if phase is SolarPhase.SUNRISE:
            self._schedule_noon(now)

        return True

    def run(self, max_ticks: int | None = None) -> None:
        """
        Tick until the process is terminated.

        Sleeps poll_interval_s after every tick that did not publish a
        transition. max_ticks bounds the loop (None runs forever).
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if not self.tick():
                self._sleep(self._poll_interval_s)
            ticks += 1

    def _fire_noon_if_due(self, now: datetime) -> None:
        pending = self.state.pending_noon_instant
        if pending is None or now.timestamp() <= pending:
            return
        _log.info("Reached %s", SolarPhase.SOLAR_NOON.name)
        self._publish(SUN_TOPIC, SolarPhase.SOLAR_NOON.wire_name)
        self.state.pending_noon_instant = None

    def _schedule_noon(self, now: datetime) -> None:
        if self.state.pending_noon_instant is not None:
            _log.info("Replacing pending solar noon prediction")
        noon = predict_solar_noon(now.date(), self.point.lon_deg)
        self.state.pending_noon_instant = noon
        _log.info(
            "Today solar noon will occur at %s",
            datetime.fromtimestamp(noon, tz=timezone.utc).isoformat(),
        )

    def _publish(self, topic: str, payload: str) -> None:
        try:
            self._sink.publish(topic, payload.encode("utf-8"))
        except PublishError as e:
            _log.error("Could not publish event to MQTT server: %s", e)


# ── Day preview ───────────────────────────────────────────────────

@dataclass(frozen=True)
class PhaseSample:
    """Sun altitude and phase at one instant of a previewed day."""
    when: datetime
    altitude_deg: float
    phase: SolarPhase


def preview_day(
    point: GeoPoint,
    day: date,
    altitude_provider: AltitudeProvider,
    step: timedelta = timedelta(minutes=6),
    tz: tzinfo = timezone.utc,
) -> list[PhaseSample]:
    """
    Sample a whole day the way the monitor would see it.

    Args:
        point: Observer location.
        day: Calendar day, interpreted in tz.
        altitude_provider: Source of sun altitudes.
        step: Sampling interval.
        tz: Time zone giving the wall clock for the morning/evening split.

    Returns:
        One PhaseSample per step from local midnight, covering 24 hours.
    """
    if step <= timedelta(0):
        raise ValueError(f"step must be positive, got {step}")

    start = datetime(day.year, day.month, day.day, tzinfo=tz)
    count = math.ceil(timedelta(days=1) / step)

    samples: list[PhaseSample] = []
    for i in range(count):
        when = start + i * step
        altitude = altitude_provider.altitude_deg(
            _timestamp_ms(when), point.lat_deg, point.lon_deg,
        )
        samples.append(PhaseSample(
            when=when,
            altitude_deg=altitude,
            phase=classify(altitude, _is_morning(when)),
        ))
    return samples
