"""Email + password login for the mobile client."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Return the user owning ``email`` if ``password`` matches.

    Email matching ignores case, the same as signup's duplicate check. An
    unknown email and a wrong password produce the same error so the
    response does not reveal which accounts exist.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong
        InactiveAccountError: If the account is deactivated
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=email)
        .first()
    )
    if user is None or not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    return user
