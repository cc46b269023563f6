"""HTTP front end that accepts events and pushes them onto the queue."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Union

from structlab.message_queue import MessageQueue

JSON_TYPE = "application/json"

_log = logging.getLogger(__name__)


def _dump(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class Response:
    """Status, body text and content type of an HTTP reply."""

    status: int
    body: str
    content_type: str = JSON_TYPE


class RestAPIServer:
    """Routes requests for the event, health and status endpoints."""

    def __init__(self, queue: MessageQueue) -> None:
        self.queue = queue
        self._routes = {
            ("POST", "/api/events"): self.post_event,
            ("GET", "/health"): lambda _body: self.health(),
            ("GET", "/status"): lambda _body: self.status(),
        }

    def handle(self, method: str, path: str, body: Union[str, bytes] = "") -> Response:
        """Dispatch a request; unknown routes get a 404 with an empty body."""
        route = self._routes.get((method.upper(), path))
        if route is None:
            return Response(404, "", "text/plain")
        return route(body)

    def post_event(self, body: Union[str, bytes]) -> Response:
        """Accept a JSON object, tag its source if missing and queue it."""
        try:
            event = json.loads(body)
            if not isinstance(event, dict):
                raise ValueError("event must be a JSON object")
        except ValueError as error:
            print(f"REST API Error: {error}", file=sys.stderr)
            return Response(400, _dump({"status": "error", "message": "Invalid JSON"}))

        print("\nREST API: Received event")
        print(f"  Source: {event.get('source', 'unknown')}")
        print(f"  Body: {_dump(event)}")
        event.setdefault("source", "rest_api")
        self.queue.push(event)
        return Response(200, _dump({"status": "success"}))

    def health(self) -> Response:
        """Liveness probe."""
        return Response(200, "OK", "text/plain")

    def status(self) -> Response:
        """Service name, state and version."""
        return Response(
            200,
            _dump({"status": "running", "service": "eda-system", "version": "1.0.0"}),
        )

    def make_server(self, host: str = "0.0.0.0", port: int = 8000) -> ThreadingHTTPServer:
        """Build a threaded HTTP server bound to ``host``:``port`` serving this API."""
        api = self

        class _Handler(BaseHTTPRequestHandler):
            def _serve(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                response = api.handle(self.command, self.path.split("?", 1)[0], body)
                payload = response.body.encode("utf-8")
                self.send_response(response.status)
                self.send_header("Content-Type", response.content_type)
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _serve

            def log_message(self, format: str, *args: Any) -> None:
                # Route access logs to the module logger instead of stderr.
                _log.debug("%s - %s", self.address_string(), format % args)

        return ThreadingHTTPServer((host, port), _Handler)

    def start(self, port: int = 8000) -> None:
        """Serve on every interface at ``port`` until the process stops."""
        print("\nREST API SERVER")
        print(f"  Listening on http://0.0.0.0:{port}\n")
        with self.make_server("0.0.0.0", port) as server:
            server.serve_forever()