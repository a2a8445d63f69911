"""RabbitMQ Message Producer — publishes report events to a durable topic exchange.

Invariants:
    - Exchange is a durable topic exchange; the queue is durable and bound by routing key
    - Messages are persistent (delivery_mode=2), JSON-encoded with orjson
    - Any broker failure is logged and raised as MessagePublishError (core/errors.py)
    - No retry: one connection attempt and one publish per call

Design Decisions:
    - Blocking pika connection per publish, run in a worker thread so the event
      loop is never blocked
    - Singleton producer initialized on startup, mirroring db_manager
"""

import asyncio
import logging
from typing import Any

import orjson
import pika
from pika.exceptions import AMQPError

from reportdesk.config import RabbitMqSettings
from reportdesk.core.errors import MessagePublishError

logger = logging.getLogger(__name__)

EXCHANGE_TYPE = "topic"


def serialize_payload(payload: Any) -> bytes:
    """Encode an ORM entity or plain mapping as JSON bytes."""
    if hasattr(payload, "__table__"):
        payload = {
            column.key: getattr(payload, column.key)
            for column in payload.__table__.columns
        }
    return orjson.dumps(payload)


class RabbitMqMessageProducer:
    """Publishes messages through pika's BlockingConnection."""

    def __init__(self, settings: RabbitMqSettings):
        self.settings = settings
        self._parameters = pika.URLParameters(settings.url)

    def _connect(self) -> pika.BlockingConnection:
        return pika.BlockingConnection(self._parameters)

    def setup(self) -> None:
        """Declare the exchange, the queue, and the binding between them."""
        connection = self._connect()
        try:
            channel = connection.channel()
            channel.exchange_declare(
                exchange=self.settings.exchange_name,
                exchange_type=EXCHANGE_TYPE,
                durable=True,
            )
            channel.queue_declare(queue=self.settings.queue_name, durable=True)
            channel.queue_bind(
                exchange=self.settings.exchange_name,
                queue=self.settings.queue_name,
                routing_key=self.settings.routing_key,
            )
            logger.info(
                f"RabbitMQ exchange '{self.settings.exchange_name}' bound to "
                f"queue '{self.settings.queue_name}'",
                extra={"routing_key": self.settings.routing_key},
            )
        finally:
            connection.close()

    def _publish(self, body: bytes, routing_key: str, exchange_name: str) -> None:
        connection = self._connect()
        try:
            channel = connection.channel()
            channel.basic_publish(
                exchange=exchange_name,
                routing_key=routing_key,
                body=body,
                properties=pika.BasicProperties(
                    delivery_mode=2,
                    content_type="application/json",
                ),
            )
        finally:
            connection.close()

    async def send_message(
        self, payload: Any, routing_key: str, exchange_name: str,
    ) -> None:
        body = serialize_payload(payload)
        try:
            await asyncio.to_thread(self._publish, body, routing_key, exchange_name)
        except (AMQPError, OSError) as e:
            logger.error(
                f"Failed to publish to {exchange_name}: {e}",
                extra={"routing_key": routing_key},
            )
            raise MessagePublishError(exchange_name, routing_key) from e
        logger.info(
            f"Published message to {exchange_name}",
            extra={"routing_key": routing_key},
        )


# Singleton (initialized on startup)
message_producer: RabbitMqMessageProducer | None = None


def init_producer(settings: RabbitMqSettings) -> RabbitMqMessageProducer:
    global message_producer
    message_producer = RabbitMqMessageProducer(settings)
    return message_producer


def get_message_producer() -> RabbitMqMessageProducer:
    """FastAPI dependency for the broker producer."""
    if not message_producer:
        raise RuntimeError("Message producer not initialized")
    return message_producer
