"""Polls a repository's public event feed and queues each event."""

from __future__ import annotations

import json
import sys
import threading
import urllib.error
import urllib.request
from typing import Any, Callable, Optional

from structlab.message_queue import MessageQueue

USER_AGENT = "eda-system-client/1.0"
DEFAULT_TIMEOUT = 10.0
DEFAULT_INTERVAL = 10.0


def http_get(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch ``url`` and return the body text.

    Error statuses still return their body; a transport failure is reported
    on stderr and yields an empty string.
    """
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return response.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as error:
        with error:
            return error.read().decode("utf-8", errors="replace")
    except OSError as error:
        print(f"[HTTP] Error: {error}", file=sys.stderr)
        return ""


def events_url(repo_full_name: str) -> str:
    """Address of the event feed for ``owner/name``."""
    return "https://api.github.com/repos/" + repo_full_name + "/events"


def push_events(queue: MessageQueue, payload: str) -> int:
    """Queue every event of a JSON array, tagged with source "github".

    Returns how many were queued; raises ValueError for anything that is not
    an array of objects.
    """
    events: Any = json.loads(payload)
    if not isinstance(events, list):
        raise ValueError("event feed must be a JSON array")
    pushed = 0
    for event in events:
        if not isinstance(event, dict):
            raise ValueError("each event must be a JSON object")
        queue.push({**event, "source": "github"})
        pushed += 1
        actor = event.get("actor")
        login = actor.get("login", "unknown") if isinstance(actor, dict) else "unknown"
        print(f"[GitHub] Event pushed: {event.get('type', 'unknown')} by {login}")
    return pushed


def fetch_github_events(
    queue: MessageQueue,
    repo_full_name: str,
    stop: Optional[threading.Event] = None,
    interval: float = DEFAULT_INTERVAL,
    fetch: Callable[[str], str] = http_get,
) -> None:
    """Fetch and queue the feed every ``interval`` seconds until ``stop`` is set."""
    if stop is None:
        stop = threading.Event()
    url = events_url(repo_full_name)
    while True:
        try:
            push_events(queue, fetch(url))
        except ValueError as error:
            print(f"[GitHub] Error fetching events: {error}", file=sys.stderr)
        if stop.wait(interval):
            return