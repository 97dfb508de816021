"""
Live notifier sessions, at most one per signed-in user.

A session bundles a RealtimeNotifier with an outbox of frames for the
client: ``tone`` when a tone should play, ``notice`` when a notice is
posted and ``invalidate`` after every announcement so cached reads are
refetched. Clients collect frames by polling.

Opening a session for a user that already has one closes the old one.
Signing out closes the user's session, and sessions nobody has polled for
``NOTIFIER_SESSION_IDLE_TIMEOUT`` seconds are closed the next time the
registry is used.
"""

import logging
import threading
import time
from collections import deque
from dataclasses import asdict

from django.conf import settings

from apps.announcements.channel import announcement_channel

from .notifier import RealtimeNotifier, NoticeBoard
from .preferences import PreferenceStore, InMemoryStorage

logger = logging.getLogger(__name__)


class NotifierSession:
    def __init__(self, subscription, preferences, cache=None, clock=time.monotonic):
        self._frames = deque()
        self._clock = clock
        self.last_polled = clock()
        self.notices = NoticeBoard(listener=self._notice_posted)
        self.notifier = RealtimeNotifier(
            subscription,
            preferences,
            tone_player=self._play_tone,
            notices=self.notices,
            cache=cache,
        )

    @property
    def preferences(self):
        return self.notifier.preferences

    @property
    def closed(self):
        return self.notifier.closed

    def idle_for(self):
        return self._clock() - self.last_polled

    def _play_tone(self, tone):
        self._frames.append({'type': 'tone', **asdict(tone)})

    def _notice_posted(self, notice):
        self._frames.append({'type': 'notice', **notice.to_dict()})

    def poll(self, timeout=0):
        """
        Wait up to ``timeout`` seconds for an announcement, then handle
        everything queued and return the frames produced since the last
        poll.
        """
        self.last_polled = self._clock()
        event = self.notifier.poll(timeout=timeout)
        while event is not None:
            self._frames.append({
                'type': 'invalidate',
                'announcement_id': str(event.id),
            })
            event = self.notifier.poll(timeout=0)

        frames = []
        while self._frames:
            frames.append(self._frames.popleft())
        self.last_polled = self._clock()
        return frames

    def close(self):
        return self.notifier.close()


class NotifierRegistry:
    """Tracks the live NotifierSession of each user."""

    def __init__(self, channel=announcement_channel, idle_timeout=None, clock=time.monotonic):
        self.channel = channel
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._sessions = {}
        self._lock = threading.Lock()

    def open(self, key, *, preferences=None, cache=None) -> NotifierSession:
        """
        Subscribe a new session for ``key``, replacing any previous one.

        ``preferences`` is a PreferenceStore; the session keeps its own copy
        so later changes go through ``update_preferences``.
        """
        self.expire_idle()
        store = PreferenceStore(InMemoryStorage())
        if preferences is not None:
            store.save(preferences.load())

        session = NotifierSession(
            self.channel.subscribe(), store, cache=cache, clock=self._clock
        )
        with self._lock:
            previous = self._sessions.get(key)
            self._sessions[key] = session

        if previous is not None:
            previous.close()
            logger.info("Replaced notifier session for %s", key)
        else:
            logger.info("Opened notifier session for %s", key)
        return session

    def get(self, key):
        self.expire_idle()
        with self._lock:
            return self._sessions.get(key)

    def get_or_open(self, key, *, preferences=None, cache=None) -> NotifierSession:
        session = self.get(key)
        if session is None or session.closed:
            session = self.open(key, preferences=preferences, cache=cache)
        return session

    def update_preferences(self, key, preferences) -> bool:
        """Copy new preferences into the live session, if any."""
        session = self.get(key)
        if session is None:
            return False
        session.preferences.save(preferences)
        return True

    def close(self, key) -> bool:
        with self._lock:
            session = self._sessions.pop(key, None)
        if session is None:
            return False
        session.close()
        logger.info("Closed notifier session for %s", key)
        return True

    def expire_idle(self) -> int:
        """Close sessions that have not been polled within the idle timeout."""
        timeout = self.idle_timeout
        if timeout is None:
            timeout = settings.NOTIFIER_SESSION_IDLE_TIMEOUT

        with self._lock:
            expired = [
                key for key, session in self._sessions.items()
                if session.idle_for() > timeout
            ]
            sessions = [self._sessions.pop(key) for key in expired]

        for key, session in zip(expired, sessions):
            session.close()
            logger.info("Expired idle notifier session for %s", key)
        return len(sessions)

    def close_all(self):
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()

    def __len__(self):
        with self._lock:
            return len(self._sessions)


notifier_registry = NotifierRegistry()
