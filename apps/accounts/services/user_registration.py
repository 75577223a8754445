"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(*, username: str, email: str, password: str) -> User:
    """
    Register a new user.

    Args:
        username: Unique login name
        email: Unique email address
        password: Plain password (will be hashed)

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the username or email is already taken
    """
    username = username.strip()
    email = email.strip().lower()

    if User.objects.filter(username__iexact=username).exists():
        raise UserRegistrationError("A user with that username already exists")
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("A user with that email already exists")

    try:
        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
        )
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered user %s", user.username)
    return user
