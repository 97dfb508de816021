"""
Role-based permission classes.

Every signed-in user holds one application role (admin, staff or student).
Admins can do everything staff can.

Usage:
    @permission_classes([IsAuthenticated, IsStaffRole])
    def record_meal(request, student_id):
        ...
"""

from rest_framework.permissions import BasePermission

from .models import UserRole


def _role(request):
    user = request.user
    if not user or not user.is_authenticated:
        return None
    return user.role


class IsAdminRole(BasePermission):
    """Permission: user must hold the admin role."""

    message = 'Administrator access required.'

    def has_permission(self, request, view):
        return _role(request) == UserRole.ADMIN


class IsStaffRole(BasePermission):
    """Permission: user must be staff or admin."""

    message = 'Staff access required.'

    def has_permission(self, request, view):
        return _role(request) in (UserRole.STAFF, UserRole.ADMIN)

