# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the solar phase event daemon.

Usage:
    # Publish phase events for a location (runs until killed)
    sun-events --lat 44.34 --lon 11.69 --broker mqtt.local

    # Same, configured from the environment (or a .env file)
    LAT=44.34 LON=11.69 MQTT_BROKER=mqtt.local MQTT_PORT=1883 sun-events

    # Log to syslog instead of stderr
    sun-events --syslog

    # Print today's (or a given day's) phase timeline without a broker
    sun-events --lat 44.34 --lon 11.69 --preview
    sun-events --lat 44.34 --lon 11.69 --preview 2026-06-21
"""
import logging
import logging.handlers
import os
import sys
from datetime import date, datetime, tzinfo
from typing import Sequence

from dotenv import load_dotenv

from sun_events.adapters import AnalyticAltitudeProvider, MqttEventSink
from sun_events.config import ConfigurationError, MonitorConfig, load_config
from sun_events.domain.solar_noon import solar_noon_utc
from sun_events.monitor import SolarPhaseMonitor, preview_day

_log = logging.getLogger(__name__)

_SYSLOG_SOCKET = "/dev/log"
_SYSLOG_IDENT = "sun_events: "


def configure_logging(config: MonitorConfig) -> None:
    """Install the root log handler: stderr by default, syslog on request."""
    if config.syslog:
        address = _SYSLOG_SOCKET if os.path.exists(_SYSLOG_SOCKET) else ("localhost", 514)
        handler: logging.Handler = logging.handlers.SysLogHandler(
            address=address,
            facility=logging.handlers.SysLogHandler.LOG_SYSLOG,
        )
        handler.ident = _SYSLOG_IDENT
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.log_level)


def _local_timezone(day: date) -> tzinfo:
    """Local UTC offset in force at the start of day."""
    return datetime(day.year, day.month, day.day).astimezone().tzinfo


def print_preview(config: MonitorConfig) -> None:
    """Print the phase timeline for config.preview_date in local time."""
    local_tz = _local_timezone(config.preview_date)
    samples = preview_day(
        config.point, config.preview_date, AnalyticAltitudeProvider(), tz=local_tz,
    )
    noon = solar_noon_utc(config.preview_date, config.point.lon_deg)
    print(f"Sun phases for {config.preview_date.isoformat()} at "
          f"lat {config.point.lat_deg:g}, lon {config.point.lon_deg:g}")
    print(f"Solar noon: {noon.astimezone(local_tz).strftime('%H:%M:%S')} "
          f"({noon.strftime('%H:%M:%S')} UTC)")

    previous = None
    for sample in samples:
        marker = "*" if sample.phase != previous else " "
        print(f"{marker} {sample.when.strftime('%H:%M')}  "
              f"{sample.phase.wire_name:<17} {sample.altitude_deg:7.2f}°")
        previous = sample.phase


def run(config: MonitorConfig) -> None:
    """Connect to the broker and run the monitor loop until interrupted."""
    sink = MqttEventSink(
        host=config.broker,
        port=config.port,
        publish_timeout=config.publish_timeout_s,
    )
    monitor = SolarPhaseMonitor(
        point=config.point,
        altitude_provider=AnalyticAltitudeProvider(),
        event_sink=sink,
        poll_interval_s=config.poll_interval_s,
    )
    _log.info(
        "Tracking sun at lat %g, lon %g; publishing to %s:%d",
        config.point.lat_deg, config.point.lon_deg, config.broker, config.port,
    )
    sink.start()
    try:
        monitor.run()
    finally:
        sink.close()


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()

    try:
        config = load_config(argv)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config)

    if config.preview_date is not None:
        print_preview(config)
        return

    try:
        run(config)
    except KeyboardInterrupt:
        _log.info("Interrupted, shutting down")


if __name__ == '__main__':
    main()
