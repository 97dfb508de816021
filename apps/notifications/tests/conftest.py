import pytest
from datetime import datetime, timezone as dt_timezone
from unittest.mock import Mock
from uuid import uuid4

from apps.announcements.channel import AnnouncementChannel, AnnouncementInserted
from apps.notifications.notifier import NoticeBoard, RealtimeNotifier
from apps.notifications.preferences import PreferenceStore, InMemoryStorage


@pytest.fixture
def channel():
    return AnnouncementChannel(name='test-channel')


@pytest.fixture
def preference_store():
    return PreferenceStore(InMemoryStorage())


@pytest.fixture
def tone_player():
    return Mock()


@pytest.fixture
def notice_board():
    return NoticeBoard()


@pytest.fixture
def notifier(channel, preference_store, tone_player, notice_board):
    notifier = RealtimeNotifier(
        channel.subscribe(),
        preference_store,
        tone_player=tone_player,
        notices=notice_board,
    )
    yield notifier
    notifier.close()


@pytest.fixture
def make_event():
    def _make(title='Sports day'):
        return AnnouncementInserted(
            id=uuid4(),
            title=title,
            content='No classes on Friday afternoon.',
            posted_by_id=None,
            created_at=datetime(2024, 5, 6, tzinfo=dt_timezone.utc),
        )
    return _make
