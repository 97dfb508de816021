"""
Unread tracking for student announcements.

Two independent signals decide whether an announcement is unread for a
student:

* the watermark ``Student.last_checked_announcements``: everything created
  at or before it counts as read;
* the dismissal set: announcements the student explicitly cleared.

Marking all as read only moves the watermark forward; it never touches
dismissals. Dismissing never moves the watermark.
"""

import logging
from datetime import datetime, timezone as dt_timezone
from typing import Optional, Set
from uuid import UUID

from django.core.cache import cache
from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from django.utils import timezone

from apps.students.models import Student

from .cache import invalidate_unread_count, unread_count_key
from .models import Announcement, AnnouncementDismissal

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)

# Cached counts expire on their own after a day even without invalidation
UNREAD_COUNT_TIMEOUT = 60 * 60 * 24


def unread_announcements(*, student: Student) -> QuerySet[Announcement]:
    """Announcements newer than the watermark and not dismissed, newest first."""
    watermark = student.last_checked_announcements or EPOCH
    dismissed = AnnouncementDismissal.objects.filter(
        student=student
    ).values('announcement_id')
    return (
        Announcement.objects
        .filter(created_at__gt=watermark)
        .exclude(id__in=dismissed)
        .order_by('-created_at')
    )


def unread_ids(*, student: Student) -> Set[UUID]:
    return set(unread_announcements(student=student).values_list('id', flat=True))


def unread_count(*, student: Student) -> int:
    """Number of unread announcements, cached per student."""
    key = unread_count_key(student.pk)
    count = cache.get(key)
    if count is None:
        count = unread_announcements(student=student).count()
        cache.set(key, count, UNREAD_COUNT_TIMEOUT)
    return count


def mark_as_read(*, student: Student, now: Optional[datetime] = None) -> datetime:
    """
    Move the student's watermark to ``now``.

    The watermark never moves backwards: an older ``now`` leaves it as is.

    Returns:
        The watermark after the update
    """
    now = now or timezone.now()

    with transaction.atomic():
        locked = Student.objects.select_for_update().get(pk=student.pk)
        current = locked.last_checked_announcements
        if current is None or now > current:
            Student.objects.filter(pk=student.pk).update(last_checked_announcements=now)
            current = now

    student.last_checked_announcements = current
    invalidate_unread_count(student.pk)
    logger.debug("Announcements watermark for %s at %s", student.student_id, current.isoformat())
    return current


def dismiss(*, student: Student, announcement: Announcement) -> bool:
    """
    Add an announcement to the student's dismissal set.

    Returns:
        True if a new dismissal was stored, False if it already existed
    """
    try:
        with transaction.atomic():
            AnnouncementDismissal.objects.create(student=student, announcement=announcement)
    except IntegrityError:
        return False
    finally:
        invalidate_unread_count(student.pk)

    logger.info("%s dismissed announcement %s", student.student_id, announcement.pk)
    return True

