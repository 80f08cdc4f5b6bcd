# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
MQTT event sink.

Implements the EventSink port on top of paho-mqtt. The paho network loop
runs on its own background thread (loop_start) and takes care of the
keepalive pings and reconnects; publish() blocks the caller until the
broker acknowledges the message or the publish timeout expires.

External dependencies (paho-mqtt, sockets) are confined to this adapter.
"""
import logging

import paho.mqtt.client as mqtt

from sun_events.ports.events import EventSink, PublishError

_log = logging.getLogger(__name__)

DEFAULT_PORT = 1883
DEFAULT_CLIENT_ID = "sun_events"


class MqttEventSink(EventSink):
    """
    Publishes events to an MQTT broker.

    Args:
        host: Broker host name or address.
        port: Broker port.
        client_id: MQTT client identifier.
        keepalive: Keepalive interval in seconds.
        qos: Delivery QoS; 2 is exactly-once.
        publish_timeout: Seconds to wait for the broker acknowledgement.
        max_queued: Cap on messages paho holds unacknowledged; beyond it
            publish fails instead of queueing.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        client_id: str = DEFAULT_CLIENT_ID,
        keepalive: int = 5,
        qos: int = 2,
        publish_timeout: float = 10.0,
        max_queued: int = 10,
    ):
        self._host = host
        self._port = port
        self._keepalive = keepalive
        self._qos = qos
        self._publish_timeout = publish_timeout
        self._client = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2, client_id=client_id,
        )
        self._client.on_connect = self._on_connect
        self._client.on_disconnect = self._on_disconnect
        self._client.max_queued_messages_set(max_queued)
        self._started = False

    def start(self) -> None:
        """Begin connecting in the background. Returns immediately."""
        if self._started:
            return
        self._client.connect_async(self._host, self._port, keepalive=self._keepalive)
        self._client.loop_start()
        self._started = True

    def close(self) -> None:
        """Disconnect and stop the network thread."""
        if not self._started:
            return
        self._client.disconnect()
        self._client.loop_stop()
        self._started = False

    def __enter__(self) -> "MqttEventSink":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def publish(self, topic: str, payload: bytes) -> None:
        # paho queues QoS>0 messages while offline and resends them on
        # reconnect; a failed publish must not be delivered later.
        if not self._client.is_connected():
            raise PublishError(f"Publish to '{topic}' failed: not connected to broker")
        try:
            info = self._client.publish(topic, payload, qos=self._qos, retain=False)
            info.wait_for_publish(timeout=self._publish_timeout)
        except (RuntimeError, ValueError, OSError) as e:
            raise PublishError(f"Publish to '{topic}' failed: {e}") from e

        if not info.is_published():
            raise PublishError(
                f"Publish to '{topic}' not acknowledged within {self._publish_timeout}s"
            )

    def _on_connect(self, client, userdata, flags, reason_code, properties) -> None:
        if reason_code.is_failure:
            _log.warning("MQTT connection to %s:%d refused: %s",
                         self._host, self._port, reason_code)
        else:
            _log.info("Connected to MQTT broker %s:%d", self._host, self._port)

    def _on_disconnect(self, client, userdata, flags, reason_code, properties) -> None:
        if reason_code.is_failure:
            _log.warning("Lost connection to MQTT broker %s:%d: %s",
                         self._host, self._port, reason_code)
