# ==========================================
# apps/announcements/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class Announcement(models.Model):
    """Message posted by staff to all students."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    content = models.TextField(max_length=1000)
    posted_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='announcements',
    )
    created_at = models.DateTimeField(default=timezone.now, db_index=True, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'announcements'
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class AnnouncementDismissal(models.Model):
    """A student explicitly clearing one announcement from their unread set."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey('students.Student', on_delete=models.CASCADE, related_name='dismissals')
    announcement = models.ForeignKey(Announcement, on_delete=models.CASCADE, related_name='dismissals')
    dismissed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'student_announcement_dismissals'
        unique_together = [['student', 'announcement']]

    def __str__(self):
        return f"{self.student} dismissed {self.announcement}"
