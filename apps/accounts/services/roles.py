"""Role lookup and assignment."""

from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import RoleAssignment, User, UserRole


def get_user_role(*, user_id: UUID) -> Optional[str]:
    """Return the role held by the user, or None if unknown."""
    try:
        user = User.objects.select_related('role_assignment').get(id=user_id)
    except User.DoesNotExist:
        return None
    return user.role


def check_user_role(*, user_id: UUID, role: str) -> bool:
    return get_user_role(user_id=user_id) == role


@transaction.atomic
def assign_role(*, user: User, role: str) -> RoleAssignment:
    """Set the user's role, replacing any previous assignment."""
    if role not in UserRole.values:
        raise ValueError(f"Unknown role: {role}")

    assignment, _ = RoleAssignment.objects.update_or_create(
        user=user,
        defaults={'role': role},
    )
    return assignment
