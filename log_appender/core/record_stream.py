"""
Broadcast stream of log records

Each logger owns one stream; every listener registered on it receives
every record emitted after registration, in emission order.
"""

from __future__ import annotations
import threading
from typing import Callable, List

from log_appender.core.log_record import LogRecord

RecordListener = Callable[[LogRecord], None]


class Subscription:
    """
    Cancellable registration of one listener on a RecordStream.

    Once cancelled a subscription never delivers again; listen on the
    stream again to get a fresh one.
    """

    def __init__(self, stream: RecordStream, listener: RecordListener):
        self._stream = stream
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        """Whether this subscription still receives records."""
        return self._active

    def cancel(self) -> None:
        """Stop delivery. Cancelling twice is a no-op."""
        self._stream._remove(self)

    def _deliver(self, record: LogRecord) -> None:
        if self._active:
            self._listener(record)

    def __repr__(self) -> str:
        """String representation."""
        return f"Subscription(active={self._active})"


class RecordStream:
    """
    Synchronous multi-listener record stream.

    Records are delivered on the emitting thread. Listener exceptions
    propagate to the caller of ``emit``.

    Thread Safety:
        Listener registration and cancellation are thread-safe. ``emit``
        iterates a snapshot, skipping subscriptions cancelled before
        their turn.
    """

    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self._lock = threading.RLock()

    def listen(self, listener: RecordListener) -> Subscription:
        """
        Register a listener.

        Args:
            listener: Callable invoked with each emitted LogRecord

        Returns:
            Subscription handle used to cancel delivery
        """
        if not callable(listener):
            raise TypeError("listener must be callable")

        subscription = Subscription(self, listener)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def emit(self, record: LogRecord) -> None:
        """Deliver a record to every active listener."""
        with self._lock:
            subscriptions = self._subscriptions.copy()

        for subscription in subscriptions:
            subscription._deliver(record)

    @property
    def listener_count(self) -> int:
        """Number of active subscriptions."""
        with self._lock:
            return len(self._subscriptions)

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            subscription._active = False
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                pass

    def __repr__(self) -> str:
        """String representation."""
        return f"RecordStream(listeners={self.listener_count})"
