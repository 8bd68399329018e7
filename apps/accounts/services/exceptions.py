"""Errors raised by signup and login."""


class AccountsServiceError(Exception):
    """Base class; views answer these with a JSON ``error``."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Signup refused, e.g. the email already has an account."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password."""
    pass


class InactiveAccountError(AccountsServiceError):
    """The account exists but has been switched off by staff."""
    pass
