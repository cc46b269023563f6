"""A thread-safe FIFO queue of JSON-like event dictionaries."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class MessageQueue:
    """First-in, first-out queue shared between producer and consumer threads.

    Popping from an empty queue yields an empty dict rather than raising,
    so consumers can treat "nothing to do" and "empty event" alike.
    """

    def __init__(self) -> None:
        self._messages: deque[dict[str, Any]] = deque()
        self._lock = threading.Lock()

    def push(self, message: dict[str, Any]) -> None:
        """Append ``message`` at the back of the queue."""
        with self._lock:
            self._messages.append(message)

    def pop(self) -> dict[str, Any]:
        """Remove and return the front message, or an empty dict when empty."""
        with self._lock:
            if self._messages:
                return self._messages.popleft()
            return {}

    def empty(self) -> bool:
        """Whether the queue holds no messages."""
        with self._lock:
            return not self._messages

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)