from rest_framework.permissions import BasePermission


class IsLinkedStudent(BasePermission):
    """
    Permission: user must have a student record linked to their account.
    """

    message = 'No student record is linked to this account.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and hasattr(user, 'student')
        )
