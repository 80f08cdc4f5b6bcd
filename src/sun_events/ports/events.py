# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for event delivery.

Adapters handle the transport (MQTT broker connection, keepalive,
acknowledgement). Callers only see publish and its failure.
"""
from typing import Protocol, runtime_checkable

SUN_TOPIC = "sun"
SUN_INFO_TOPIC = "sun/info"


class PublishError(ConnectionError):
    """An event could not be delivered to the message bus."""


@runtime_checkable
class EventSink(Protocol):
    """Port for publishing named events to a message bus."""

    def publish(self, topic: str, payload: bytes) -> None:
        """
        Publish a payload with at-least-once-or-better delivery.

        Blocks until the transport confirms delivery or gives up.

        Raises:
            PublishError: If the event could not be delivered.
        """
        ...
