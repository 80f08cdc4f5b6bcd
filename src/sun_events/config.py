# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Startup configuration.

Command-line options take precedence over environment variables:

    LAT, LON            observer coordinates (degrees)
    MQTT_BROKER         broker host
    MQTT_PORT           broker port (default 1883)
    POLL_INTERVAL       seconds between idle ticks (default 60)
    PUBLISH_TIMEOUT     seconds to wait for a broker acknowledgement (default 10)
    LOG_LEVEL           logging level name (default INFO)
    SUN_EVENTS_SYSLOG   log to syslog when set to 1/true/yes
"""
import argparse
import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Sequence

from sun_events.domain.observation import GeoPoint

DEFAULT_MQTT_PORT = 1883
DEFAULT_POLL_INTERVAL_S = 60.0
DEFAULT_PUBLISH_TIMEOUT_S = 10.0

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigurationError(ValueError):
    """Missing or invalid startup configuration."""


@dataclass(frozen=True)
class MonitorConfig:
    """Validated process configuration."""
    point: GeoPoint
    broker: str | None
    port: int = DEFAULT_MQTT_PORT
    poll_interval_s: float = DEFAULT_POLL_INTERVAL_S
    publish_timeout_s: float = DEFAULT_PUBLISH_TIMEOUT_S
    log_level: str = "INFO"
    syslog: bool = False
    preview_date: date | None = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sun-events",
        description="Publish solar phase events (dawn, sunrise, noon, sunset, dusk) to MQTT",
    )
    parser.add_argument('--lat', help="Observer latitude in degrees (env: LAT)")
    parser.add_argument('--lon', help="Observer longitude in degrees, east positive (env: LON)")

    mqtt_group = parser.add_argument_group('message bus')
    mqtt_group.add_argument('--broker', help="MQTT broker host (env: MQTT_BROKER)")
    mqtt_group.add_argument(
        '--port',
        help=f"MQTT broker port (env: MQTT_PORT, default: {DEFAULT_MQTT_PORT})"
    )
    mqtt_group.add_argument(
        '--publish-timeout',
        help=f"Seconds to wait for each publish (env: PUBLISH_TIMEOUT, "
             f"default: {DEFAULT_PUBLISH_TIMEOUT_S:g})"
    )

    parser.add_argument(
        '--poll-interval',
        help=f"Seconds between idle ticks (env: POLL_INTERVAL, "
             f"default: {DEFAULT_POLL_INTERVAL_S:g})"
    )
    parser.add_argument(
        '--preview', nargs='?', const='today', metavar='DATE',
        help="Print the phase timeline for DATE (YYYY-MM-DD, default today) and exit"
    )

    log_group = parser.add_argument_group('logging')
    log_group.add_argument('--log-level', help="Logging level (env: LOG_LEVEL, default: INFO)")
    log_group.add_argument(
        '--syslog', action='store_true', default=None,
        help="Log to syslog instead of stderr (env: SUN_EVENTS_SYSLOG)"
    )
    return parser


def _parse_float(raw: str | None, missing: str, invalid: str) -> float:
    if raw is None or raw.strip() == "":
        raise ConfigurationError(missing)
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{invalid}: {raw!r}") from None


def _env_port(environ: Mapping[str, str]) -> int:
    # Unparsable MQTT_PORT falls back to the default port.
    try:
        return int(environ["MQTT_PORT"])
    except (KeyError, ValueError):
        return DEFAULT_MQTT_PORT


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid MQTT port: {raw!r}") from None


def _parse_seconds(raw: str | None, name: str, default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid {name}: {raw!r}") from None


def _parse_preview(raw: str | None) -> date | None:
    if raw is None:
        return None
    if raw == 'today':
        return date.today()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid preview date (expected YYYY-MM-DD): {raw!r}") from None


def load_config(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> MonitorConfig:
    """
    Build the configuration from arguments and environment.

    Args:
        argv: Command-line arguments (without program name); sys.argv by default.
        environ: Environment mapping; os.environ by default.

    Returns:
        MonitorConfig with validated coordinates.

    Raises:
        ConfigurationError: On missing or unparsable settings.
    """
    env = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)

    lat = _parse_float(args.lat if args.lat is not None else env.get("LAT"),
                       "Missing latitude", "Invalid latitude")
    lon = _parse_float(args.lon if args.lon is not None else env.get("LON"),
                       "Missing longitude", "Invalid longitude")
    try:
        point = GeoPoint(lat_deg=lat, lon_deg=lon)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    preview_date = _parse_preview(args.preview)

    broker = args.broker if args.broker is not None else env.get("MQTT_BROKER")
    if broker is not None and broker.strip() == "":
        broker = None
    if broker is None and preview_date is None:
        raise ConfigurationError("Please provide a MQTT broker")

    port = _parse_port(args.port) if args.port is not None else _env_port(env)
    if not 0 < port < 65536:
        raise ConfigurationError(f"Invalid MQTT port: {port}")

    poll_interval = _parse_seconds(
        args.poll_interval if args.poll_interval is not None else env.get("POLL_INTERVAL"),
        "POLL_INTERVAL", DEFAULT_POLL_INTERVAL_S,
    )
    if not poll_interval > 0:
        raise ConfigurationError(f"Poll interval must be positive: {poll_interval}")

    publish_timeout = _parse_seconds(
        args.publish_timeout if args.publish_timeout is not None else env.get("PUBLISH_TIMEOUT"),
        "PUBLISH_TIMEOUT", DEFAULT_PUBLISH_TIMEOUT_S,
    )
    if not publish_timeout > 0:
        raise ConfigurationError(f"Publish timeout must be positive: {publish_timeout}")

    log_level = (args.log_level or env.get("LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Invalid log level: {log_level!r}")

    syslog = (args.syslog if args.syslog is not None
              else env.get("SUN_EVENTS_SYSLOG", "").strip().lower() in _TRUTHY)

    return MonitorConfig(
        point=point,
        broker=broker,
        port=port,
        poll_interval_s=poll_interval,
        publish_timeout_s=publish_timeout,
        log_level=log_level,
        syslog=syslog,
        preview_date=preview_date,
    )
