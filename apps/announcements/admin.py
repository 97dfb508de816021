from django.contrib import admin

from .models import Announcement, AnnouncementDismissal


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    """Admin interface for announcements."""

    list_display = ['title', 'posted_by', 'created_at', 'updated_at']
    search_fields = ['title', 'content']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'


@admin.register(AnnouncementDismissal)
class AnnouncementDismissalAdmin(admin.ModelAdmin):
    list_display = ['student', 'announcement', 'dismissed_at']
    search_fields = ['student__student_id', 'announcement__title']
    readonly_fields = ['dismissed_at']
