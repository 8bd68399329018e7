"""
Accounts services.

Signup provisions the user's wallet in the same transaction; login checks
the password and stamps last_login.
"""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user

__all__ = [
    'register_user',
    'authenticate_user',
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
]
