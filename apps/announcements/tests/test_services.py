"""
Service layer unit tests for announcements app.
"""

import pytest
from uuid import uuid4

from apps.announcements.models import Announcement
from apps.announcements.services import (
    list_announcements,
    get_announcement,
    create_announcement,
    update_announcement,
    delete_announcement,
)
from apps.announcements.services.exceptions import AnnouncementNotFoundError
from apps.announcements.unread import unread_count


@pytest.mark.django_db
class TestAnnouncementManagement:

    def test_create_announcement(self, staff_user):
        announcement = create_announcement(
            title='Library closed',
            content='The library is closed on Monday.',
            posted_by=staff_user,
        )

        assert announcement.posted_by == staff_user
        assert Announcement.objects.count() == 1

    def test_list_newest_first(self, announcements):
        titles = [a.title for a in list_announcements()]

        assert titles == ['Third', 'Second', 'First']

    def test_create_refreshes_cached_reads(self, student, announcements, staff_user,
                                           django_capture_on_commit_callbacks):
        assert len(list_announcements()) == 3
        assert unread_count(student=student) == 3

        with django_capture_on_commit_callbacks(execute=True):
            create_announcement(
                title='Fourth',
                content='Yet another announcement.',
                posted_by=staff_user,
            )

        assert len(list_announcements()) == 4
        assert unread_count(student=student) == 4

    def test_update_announcement(self, announcements):
        updated = update_announcement(
            announcement_id=announcements[0].id,
            title='First (edited)',
        )

        assert updated.title == 'First (edited)'
        assert updated.content == announcements[0].content

    def test_update_missing(self):
        with pytest.raises(AnnouncementNotFoundError):
            update_announcement(announcement_id=uuid4(), title='Nope')

    def test_delete_refreshes_unread(self, student, announcements, django_capture_on_commit_callbacks):
        assert unread_count(student=student) == 3

        with django_capture_on_commit_callbacks(execute=True):
            delete_announcement(announcement_id=announcements[0].id)

        assert unread_count(student=student) == 2
        with pytest.raises(AnnouncementNotFoundError):
            get_announcement(announcement_id=announcements[0].id)

    def test_delete_missing(self):
        with pytest.raises(AnnouncementNotFoundError, match="Announcement not found"):
            delete_announcement(announcement_id=uuid4())
