"""
Login for the ledger API.

Users normally sign in with their username. Because registration collects
an e-mail address as well, a login containing ``@`` is looked up by
e-mail instead; usernames may not contain ``@``.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


def login_lookup(login: str) -> dict:
    if '@' in login:
        return {'email__iexact': login}
    return {'username': login}


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Check a login and stamp ``last_login``.

    Raises:
        InvalidCredentialsError: Unknown login or wrong password
        InactiveAccountError: If the account is deactivated
    """
    login = username.strip()
    user = User.objects.select_for_update().filter(**login_lookup(login)).first()

    if user is None or not user.check_password(password):
        logger.info("Failed login for %r", login)
        raise InvalidCredentialsError("Invalid username or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    logger.info("User %s logged in", user.username)
    return user
