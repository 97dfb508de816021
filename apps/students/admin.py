from django.contrib import admin

from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    """Admin interface for students."""

    list_display = ['student_id', 'full_name', 'grade', 'sex', 'status', 'user', 'created_at']
    list_filter = ['status', 'sex', 'grade']
    search_fields = ['student_id', 'full_name', 'user__email']
    readonly_fields = ['student_id', 'last_checked_announcements', 'created_at', 'updated_at']
    ordering = ['-created_at']
