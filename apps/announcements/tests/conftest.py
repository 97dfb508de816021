import pytest
from datetime import datetime, timedelta, timezone as dt_timezone

from apps.announcements.models import Announcement


@pytest.fixture
def base_time():
    return datetime(2024, 5, 6, 9, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def make_announcement(db, staff_user, base_time):
    """Factory: announcement created ``minutes`` after base_time."""
    def _make(minutes=0, title='Menu change', content='Lunch moves to 12:30 today.'):
        return Announcement.objects.create(
            title=title,
            content=content,
            posted_by=staff_user,
            created_at=base_time + timedelta(minutes=minutes),
        )
    return _make


@pytest.fixture
def announcements(make_announcement):
    """Three announcements, one hour apart."""
    return [
        make_announcement(minutes=0, title='First'),
        make_announcement(minutes=60, title='Second'),
        make_announcement(minutes=120, title='Third'),
    ]
