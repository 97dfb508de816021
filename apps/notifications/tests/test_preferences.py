import json

import pytest

from apps.notifications.preferences import (
    PREFERENCES_KEY,
    DEFAULT_PREFERENCES,
    NotificationPreferences,
    PreferenceStore,
    InMemoryStorage,
)


class TestPreferenceStore:

    def test_defaults_when_nothing_stored(self, preference_store):
        assert preference_store.load() == NotificationPreferences(sound_enabled=True, toast_enabled=True)

    def test_toggle_persists_across_reload(self):
        storage = InMemoryStorage()
        PreferenceStore(storage).toggle('sound_enabled')
        PreferenceStore(storage).toggle('toast_enabled')
        PreferenceStore(storage).toggle('toast_enabled')

        reloaded = PreferenceStore(storage).load()

        assert reloaded.sound_enabled is False
        assert reloaded.toast_enabled is True

    def test_stored_under_namespaced_key(self, preference_store):
        preference_store.update(toast_enabled=False)

        raw = preference_store.storage.get(PREFERENCES_KEY)
        assert json.loads(raw) == {'sound_enabled': True, 'toast_enabled': False}

    def test_partial_record_merged_over_defaults(self):
        storage = InMemoryStorage({PREFERENCES_KEY: json.dumps({'sound_enabled': False})})

        assert PreferenceStore(storage).load() == NotificationPreferences(
            sound_enabled=False,
            toast_enabled=True,
        )

    @pytest.mark.parametrize('raw', [
        'not json',
        '[1, 2]',
        '{"sound_enabled": "no"}',
        '',
    ])
    def test_unreadable_data_yields_defaults(self, raw):
        storage = InMemoryStorage({PREFERENCES_KEY: raw})

        assert PreferenceStore(storage).load() == DEFAULT_PREFERENCES
