"""Command that runs the event-driven demo: fetcher, consumers and HTTP API."""

from __future__ import annotations

import argparse
import threading
from dataclasses import dataclass
from typing import Optional, Sequence

from structlab.consumers import KafkaConsumer, RabbitMQConsumer
from structlab.github import fetch_github_events
from structlab.message_queue import MessageQueue
from structlab.rest_api import RestAPIServer

DEFAULT_REPO = "octocat/Hello-World"
DEFAULT_PORT = 8000
KAFKA_BROKERS = "172.23.201.90:9092"
KAFKA_GROUP = "eda-group"
RABBITMQ_HOST = "localhost"
RABBITMQ_PORT = 5672


@dataclass
class Services:
    """The services that share one message queue."""

    queue: MessageQueue
    kafka: KafkaConsumer
    rabbitmq: RabbitMQConsumer
    rest_server: RestAPIServer


def build_services(queue: Optional[MessageQueue] = None) -> Services:
    """Create the consumers and the API server around ``queue``."""
    if queue is None:
        queue = MessageQueue()
    return Services(
        queue=queue,
        kafka=KafkaConsumer(queue, KAFKA_BROKERS, KAFKA_GROUP),
        rabbitmq=RabbitMQConsumer(queue, RABBITMQ_HOST, RABBITMQ_PORT),
        rest_server=RestAPIServer(queue),
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structlab", description="Run the event-driven architecture demo."
    )
    parser.add_argument("--port", type=int, default=DEFAULT_PORT,
                        help="port of the HTTP API (default %(default)s)")
    parser.add_argument("--repo", default=DEFAULT_REPO,
                        help="repository whose events are fetched (default %(default)s)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start every service and run until interrupted."""
    args = _parser().parse_args(argv)
    print("║ EVENT-DRIVEN ARCHITECTURE SYSTEM ║\n")

    services = build_services()
    stop = threading.Event()
    threads = [
        threading.Thread(target=fetch_github_events,
                         args=(services.queue, args.repo, stop), daemon=True),
        threading.Thread(target=services.kafka.run, args=(stop,), daemon=True),
        threading.Thread(target=services.rabbitmq.run, args=(stop,), daemon=True),
    ]
    print(f"REST API SERVER listening on port {args.port}")
    threads.append(threading.Thread(target=services.rest_server.start,
                                    args=(args.port,), daemon=True))
    try:
        for thread in threads:
            thread.start()
        while any(thread.is_alive() for thread in threads):
            for thread in threads:
                thread.join(timeout=0.5)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
    return 0