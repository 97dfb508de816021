"""
In-process channel of announcement insert events.

Producers publish one event per committed announcement insert; every open
subscription receives its own copy in a FIFO queue. A subscription is
closed exactly once, which removes it from the channel so no further
events are queued for it.

Example::

    subscription = announcement_channel.subscribe()
    try:
        for event in subscription:
            print(event.title)
    finally:
        subscription.close()
"""

import logging
import queue
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

logger = logging.getLogger(__name__)

_CLOSED = object()


@dataclass(frozen=True)
class AnnouncementInserted:
    """Payload of a newly inserted announcement."""

    id: UUID
    title: str
    content: str
    posted_by_id: Optional[UUID]
    created_at: datetime

    @classmethod
    def from_announcement(cls, announcement):
        return cls(
            id=announcement.id,
            title=announcement.title,
            content=announcement.content,
            posted_by_id=announcement.posted_by_id,
            created_at=announcement.created_at,
        )


class Subscription:
    """One consumer's view of the channel."""

    def __init__(self, channel):
        self._channel = channel
        self._queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def deliver(self, event):
        if not self._closed:
            self._queue.put(event)

    def get(self, timeout=None):
        """
        Next event, or None when the timeout expires or the subscription
        has been closed. ``timeout=0`` never blocks.
        """
        if self._closed and self._queue.empty():
            return None
        try:
            event = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if event is _CLOSED:
            return None
        return event

    def close(self):
        """Unsubscribe. Returns False if already closed."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True

        self._channel._unsubscribe(self)
        # Wake up a consumer blocked in get()
        self._queue.put(_CLOSED)
        return True

    def __iter__(self):
        while True:
            event = self.get()
            if event is None:
                return
            yield event

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class AnnouncementChannel:
    """Fan-out of announcement insert events to subscriptions."""

    def __init__(self, name='announcements-channel'):
        self.name = name
        self._subscribers = set()
        self._lock = threading.Lock()

    def subscribe(self):
        subscription = Subscription(self)
        with self._lock:
            self._subscribers.add(subscription)
        logger.debug("Subscribed to %s (%d open)", self.name, len(self._subscribers))
        return subscription

    def _unsubscribe(self, subscription):
        with self._lock:
            self._subscribers.discard(subscription)
        logger.debug("Unsubscribed from %s (%d open)", self.name, len(self._subscribers))

    def publish(self, event):
        """Deliver an event to every open subscription. Returns the fan-out size."""
        with self._lock:
            subscribers = list(self._subscribers)
        for subscription in subscribers:
            subscription.deliver(event)
        logger.info("Published announcement %s to %d subscriber(s)", event.id, len(subscribers))
        return len(subscribers)

    @property
    def subscriber_count(self):
        with self._lock:
            return len(self._subscribers)


announcement_channel = AnnouncementChannel()
