# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for the phase monitor's external collaborators.

Adapters implement these to supply sun altitudes and to deliver events.
"""
from sun_events.ports.altitude import AltitudeProvider
from sun_events.ports.events import EventSink, PublishError

__all__ = ["AltitudeProvider", "EventSink", "PublishError"]
