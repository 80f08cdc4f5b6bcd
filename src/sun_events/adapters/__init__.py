# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for altitude computation and event delivery.

External dependencies (paho-mqtt, network I/O) are confined to this layer.
"""
from sun_events.adapters.analytic_altitude import AnalyticAltitudeProvider
from sun_events.adapters.mqtt_sink import MqttEventSink

__all__ = ["AnalyticAltitudeProvider", "MqttEventSink"]
