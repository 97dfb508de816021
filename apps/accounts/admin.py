# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, RoleAssignment, UserRole


ROLE_COLORS = {
    UserRole.ADMIN: '#B85C5C',
    UserRole.STAFF: '#A47449',
    UserRole.STUDENT: '#6B8E5E',
}


class RoleAssignmentInline(admin.StackedInline):
    model = RoleAssignment
    can_delete = False
    extra = 0


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for users with their application role."""

    list_display = [
        'email',
        'full_name',
        'role_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_superuser',
        'role_assignment__role',
        'created_at',
    ]

    search_fields = [
        'email',
        'full_name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'full_name', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'full_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']
    filter_horizontal = ['groups', 'user_permissions']
    inlines = [RoleAssignmentInline]

    def role_badge(self, obj):
        """Display application role as colored badge."""
        role = obj.role
        if role is None:
            return '-'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            ROLE_COLORS.get(role, '#ccc'),
            UserRole(role).label,
        )
    role_badge.short_description = 'Role'

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('role_assignment')
