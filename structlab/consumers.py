"""Event consumers that drain a shared message queue."""

from __future__ import annotations

import threading
from typing import Any, Optional

from structlab.message_queue import MessageQueue

DEFAULT_INTERVAL = 0.5


class Consumer:
    """Pulls events off a queue and reports the processing steps it runs."""

    tag = "Consumer"
    steps: tuple[str, ...] = ()

    def __init__(self, queue: MessageQueue) -> None:
        self.queue = queue
        self.processed = 0

    def banner(self) -> str:
        """Text announcing the service when it starts."""
        return f"\n{self.tag.upper()} CONSUMER SERVICE\n  Waiting for messages...\n\n"

    def process(self, event: dict[str, Any]) -> str:
        """Count ``event`` as processed and return the report for it."""
        self.processed += 1
        prefix = f"    [{self.tag}]"
        lines = [
            f"{prefix} Message #{self.processed}",
            f"{prefix} Processing: {event.get('source', 'unknown')}",
        ]
        lines.extend(f"{prefix} → {step}" for step in self.steps)
        lines.append("   ✓ Complete")
        return "\n".join(lines) + "\n\n"

    def poll_once(self) -> bool:
        """Process one waiting event, if any; return whether one was handled."""
        if self.queue.empty():
            return False
        event = self.queue.pop()
        if not event:
            return False
        print(self.process(event), end="")
        return True

    def run(self, stop: Optional[threading.Event] = None,
            interval: float = DEFAULT_INTERVAL) -> None:
        """Poll the queue every ``interval`` seconds until ``stop`` is set."""
        if stop is None:
            stop = threading.Event()
        print(self.banner(), end="")
        while not stop.is_set():
            self.poll_once()
            stop.wait(interval)


class KafkaConsumer(Consumer):
    """Consumer that computes analytics for each event."""

    tag = "Kafka"
    steps = ("Analytics computed", "Event logged")

    def __init__(self, queue: MessageQueue, brokers: str, group_id: str) -> None:
        super().__init__(queue)
        self.brokers = brokers
        self.group_id = group_id

    def banner(self) -> str:
        return (
            "\nKAFKA CONSUMER SERVICE\n"
            f"  Brokers: {self.brokers}\n"
            f"  Group ID: {self.group_id}\n"
            "  Waiting for messages...\n\n"
        )


class RabbitMQConsumer(Consumer):
    """Consumer that enriches each event and raises an alert for it."""

    tag = "RabbitMQ"
    steps = ("Data enriched", "Alert sent", "Event logged")

    def __init__(self, queue: MessageQueue, host: str, port: int) -> None:
        super().__init__(queue)
        self.host = host
        self.port = port

    def banner(self) -> str:
        return (
            "\nRABBITMQ CONSUMER SERVICE\n"
            f"  Host: {self.host}\n"
            f"  Port: {self.port}\n"
            "  Waiting for messages...\n\n"
        )