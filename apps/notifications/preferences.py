"""
Notification preferences kept on the client device.

Preferences are two booleans stored as one JSON record under a single
namespaced key. They are never written to the database and never shared
between devices: over HTTP the storage is the signed-cookie session.

Reads merge stored values over the defaults, so a record written by an
older client that lacks a field still yields a complete set. Anything
unreadable yields the defaults.
"""

import json
import logging
from dataclasses import dataclass, asdict, fields, replace

logger = logging.getLogger(__name__)

PREFERENCES_KEY = 'notification-preferences'


@dataclass(frozen=True)
class NotificationPreferences:
    sound_enabled: bool = True
    toast_enabled: bool = True

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def to_dict(self):
        return asdict(self)


DEFAULT_PREFERENCES = NotificationPreferences()


class InMemoryStorage:
    """Key/value text storage held in a dict."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = value


class SessionStorage:
    """Key/value text storage backed by a Django session."""

    def __init__(self, session):
        self.session = session

    def get(self, key):
        return self.session.get(key)

    def set(self, key, value):
        self.session[key] = value
        self.session.modified = True


class PreferenceStore:
    """Load and persist NotificationPreferences through a storage."""

    def __init__(self, storage, key=PREFERENCES_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> NotificationPreferences:
        raw = self.storage.get(self.key)
        if raw is None:
            return DEFAULT_PREFERENCES

        try:
            stored = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Unreadable notification preferences, using defaults")
            return DEFAULT_PREFERENCES

        if not isinstance(stored, dict):
            return DEFAULT_PREFERENCES

        values = {
            name: stored[name]
            for name in NotificationPreferences.field_names()
            if isinstance(stored.get(name), bool)
        }
        return replace(DEFAULT_PREFERENCES, **values)

    def save(self, preferences: NotificationPreferences) -> NotificationPreferences:
        self.storage.set(self.key, json.dumps(preferences.to_dict()))
        return preferences

    def update(self, **changes) -> NotificationPreferences:
        """Apply partial changes on top of the current preferences and persist."""
        return self.save(replace(self.load(), **changes))

    def toggle(self, name) -> NotificationPreferences:
        current = self.load()
        return self.update(**{name: not getattr(current, name)})
