"""User registration service."""

import logging
from typing import Optional

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.accounts.models import RoleAssignment, UserRole
from apps.students.models import Student

from .exceptions import UserRegistrationError, StudentLinkError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    full_name: str = "",
    student_code: Optional[str] = None
) -> User:
    """
    Sign up a new user. New accounts always get the student role.

    When ``student_code`` is given the account is linked to that student
    record, which must exist and must not already belong to another user.

    Raises:
        UserRegistrationError: If the email is taken or creation fails
        StudentLinkError: If the student record cannot be linked
    """
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("A user with this email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            full_name=full_name
        )
        RoleAssignment.objects.create(user=user, role=UserRole.STUDENT)
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    if student_code:
        try:
            student = (
                Student.objects
                .select_for_update()
                .get(student_id=student_code.strip().upper())
            )
        except Student.DoesNotExist:
            raise StudentLinkError("Student not found")

        if student.user_id is not None:
            raise StudentLinkError("Student is already linked to an account")

        student.user = user
        student.save(update_fields=['user', 'updated_at'])

    logger.info("Registered user %s", user.email)
    return user
