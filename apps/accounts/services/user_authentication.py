"""
Sign-in for students, staff and admins.

Emails are matched without regard to case or surrounding whitespace. An
unknown email and a wrong password produce the same error.
"""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()


def authenticate_user(*, email: str, password: str) -> User:
    """
    Check credentials and stamp ``last_login``.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: The account has been deactivated
    """
    user = User.objects.filter(email__iexact=email.strip()).first()
    if user is None or not user.check_password(password):
        logger.info("Failed sign-in for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    return user
