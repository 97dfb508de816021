"""Password change for signed-in users."""

from django.db import transaction

from apps.accounts.models import User

from .exceptions import PasswordConfirmationError, WeakPasswordError

MIN_PASSWORD_LENGTH = 6


@transaction.atomic
def change_password(*, user: User, new_password: str, confirm_password: str) -> User:
    """
    Replace the user's password.

    Raises:
        WeakPasswordError: If the password is shorter than six characters
        PasswordConfirmationError: If the confirmation does not match
    """
    if len(new_password or '') < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )

    if new_password != confirm_password:
        raise PasswordConfirmationError("Passwords do not match")

    user.set_password(new_password)
    user.save(update_fields=['password'])
    return user
