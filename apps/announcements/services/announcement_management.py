"""
Announcement management service.

Staff post, edit and delete announcements. The model signals drop cached
reads of all students once a mutation commits, and publish inserts on the
announcement channel.
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.core.cache import cache
from django.db import transaction

from apps.accounts.models import User
from apps.announcements.cache import announcement_list_key
from apps.announcements.models import Announcement

from .exceptions import AnnouncementNotFoundError

logger = logging.getLogger(__name__)

ANNOUNCEMENT_LIST_TIMEOUT = 60 * 5


def list_announcements() -> List[Announcement]:
    """All announcements, newest first. Cached until the next mutation."""
    key = announcement_list_key()
    announcements = cache.get(key)
    if announcements is None:
        announcements = list(
            Announcement.objects.select_related('posted_by').order_by('-created_at')
        )
        cache.set(key, announcements, ANNOUNCEMENT_LIST_TIMEOUT)
    return announcements


def get_announcement(*, announcement_id: UUID) -> Announcement:
    try:
        return Announcement.objects.select_related('posted_by').get(id=announcement_id)
    except Announcement.DoesNotExist:
        raise AnnouncementNotFoundError("Announcement not found")


@transaction.atomic
def create_announcement(*, title: str, content: str, posted_by: Optional[User]) -> Announcement:
    announcement = Announcement.objects.create(
        title=title,
        content=content,
        posted_by=posted_by,
    )
    logger.info("Announcement %s posted by %s", announcement.id, posted_by)
    return announcement


@transaction.atomic
def update_announcement(*, announcement_id: UUID, **fields) -> Announcement:
    """
    Update title and/or content of an announcement.

    Raises:
        AnnouncementNotFoundError: If the announcement does not exist
    """
    announcement = get_announcement(announcement_id=announcement_id)

    for field in ('title', 'content'):
        if field in fields:
            setattr(announcement, field, fields[field])
    announcement.save()

    return announcement


@transaction.atomic
def delete_announcement(*, announcement_id: UUID) -> None:
    announcement = get_announcement(announcement_id=announcement_id)
    announcement.delete()
    logger.info("Announcement %s deleted", announcement_id)
