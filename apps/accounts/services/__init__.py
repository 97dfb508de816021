"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PasswordConfirmationError,
    WeakPasswordError,
    StudentLinkError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .password_management import change_password
from .roles import get_user_role, check_user_role, assign_role

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'PasswordConfirmationError',
    'WeakPasswordError',
    'StudentLinkError',
    # Services
    'register_user',
    'authenticate_user',
    'change_password',
    'get_user_role',
    'check_user_role',
    'assign_role',
]
