"""
Realtime announcement notifier.

Consumes insert events from an announcement channel subscription. For each
new announcement it:

1. plays a short tone if sound is enabled (failures are logged and ignored),
2. posts a transient "New Announcement" notice if toasts are enabled,
3. always invalidates cached unread counts and announcement lists.

Preferences are re-read for every event, so toggling them takes effect on
the next announcement without reopening the notifier.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from django.conf import settings
from django.utils import timezone

from apps.announcements.cache import invalidate_announcement_reads

logger = logging.getLogger(__name__)

NEW_ANNOUNCEMENT_TITLE = 'New Announcement'


@dataclass(frozen=True)
class ToneSpec:
    """A synthesized tone: one waveform with an exponential gain ramp."""

    waveform: str = 'sine'
    frequency_hz: int = 800
    duration_s: float = 0.5
    start_gain: float = 0.3
    end_gain: float = 0.01


NEW_ANNOUNCEMENT_TONE = ToneSpec()


@dataclass
class Notice:
    title: str
    description: str
    duration_ms: int
    dismissible: bool = True
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=timezone.now)

    @property
    def expires_at(self):
        return self.created_at + timedelta(milliseconds=self.duration_ms)

    def is_expired(self, now=None):
        return (now or timezone.now()) >= self.expires_at

    def to_dict(self):
        return {
            'id': str(self.id),
            'title': self.title,
            'description': self.description,
            'duration_ms': self.duration_ms,
            'dismissible': self.dismissible,
            'created_at': self.created_at.isoformat(),
            'expires_at': self.expires_at.isoformat(),
        }


class NoticeBoard:
    """Transient notices. Expired notices drop out whenever the board is touched."""

    def __init__(self, listener: Optional[Callable[[Notice], None]] = None):
        self._notices: List[Notice] = []
        self._lock = threading.Lock()
        self.listener = listener

    def _prune(self, now):
        self._notices = [n for n in self._notices if not n.is_expired(now)]

    def post(self, notice: Notice) -> Notice:
        with self._lock:
            self._prune(timezone.now())
            self._notices.append(notice)
        if self.listener is not None:
            self.listener(notice)
        return notice

    def active(self, now=None) -> List[Notice]:
        now = now or timezone.now()
        with self._lock:
            self._prune(now)
            return list(self._notices)

    def dismiss(self, notice_id) -> bool:
        with self._lock:
            for notice in self._notices:
                if notice.id == notice_id and notice.dismissible:
                    self._notices.remove(notice)
                    return True
        return False

    def __len__(self):
        with self._lock:
            return len(self._notices)


class RealtimeNotifier:
    """
    Turns announcement insert events into tone, notice and cache effects.

    Args:
        subscription: Open channel subscription, owned by the notifier
        preferences: Object with ``load()`` returning NotificationPreferences
        tone_player: Callable receiving a ToneSpec; may raise
        notices: NoticeBoard receiving new-announcement notices
        cache: Cache holding announcement reads (default cache if None)
    """

    def __init__(self, subscription, preferences, tone_player=None, notices=None, cache=None):
        self.subscription = subscription
        self.preferences = preferences
        self.tone_player = tone_player
        self.notices = notices if notices is not None else NoticeBoard()
        self.cache = cache
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def handle(self, event):
        preferences = self.preferences.load()

        if preferences.sound_enabled and self.tone_player is not None:
            try:
                self.tone_player(NEW_ANNOUNCEMENT_TONE)
            except Exception:
                logger.warning("Could not play notification tone", exc_info=True)

        if preferences.toast_enabled:
            self.notices.post(Notice(
                title=NEW_ANNOUNCEMENT_TITLE,
                description=event.title,
                duration_ms=settings.NOTIFICATION_TOAST_DURATION_MS,
            ))

        invalidate_announcement_reads(self.cache)

    def poll(self, timeout=None):
        """Wait for one event and handle it. Returns the event or None."""
        if self._closed:
            return None
        event = self.subscription.get(timeout=timeout)
        if event is not None:
            self.handle(event)
        return event

    def process_pending(self) -> int:
        """Handle every queued event without blocking. Returns how many."""
        handled = 0
        while self.poll(timeout=0) is not None:
            handled += 1
        return handled

    def run(self):
        """Handle events until the notifier is closed."""
        while not self._closed:
            self.poll()

    def close(self) -> bool:
        """Close the subscription. Only the first call has an effect."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True
        self.subscription.close()
        logger.debug("Notifier closed")
        return True
