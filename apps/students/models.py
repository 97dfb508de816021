# ==========================================
# apps/students/models.py
# ==========================================

from django.db import models
import uuid


class StudentStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    SUSPENDED = 'suspended', 'Suspended'
    UNDER_STANDARD = 'under_standard', 'Under Standard'


class Sex(models.TextChoices):
    MALE = 'Male', 'Male'
    FEMALE = 'Female', 'Female'
    OTHER = 'Other', 'Other'


class Student(models.Model):
    """A student who can be served meals."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Human-facing code staff type into the search box, e.g. STU00042
    student_id = models.CharField(max_length=20, unique=True, db_index=True, editable=False)
    full_name = models.CharField(max_length=100)
    grade = models.CharField(max_length=20)
    sex = models.CharField(max_length=10, choices=Sex.choices)
    status = models.CharField(max_length=20, choices=StudentStatus.choices, default=StudentStatus.ACTIVE)
    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='student',
    )
    # Announcements created after this instant count as unread
    last_checked_announcements = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'students'
        indexes = [
            models.Index(fields=['status'], name='students_status_idx'),
            models.Index(fields=['created_at'], name='students_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.full_name} ({self.student_id})"

    @property
    def can_receive_meals(self):
        return self.status == StudentStatus.ACTIVE
