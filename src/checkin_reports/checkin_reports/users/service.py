from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

MSG_CREDENTIALS_REQUIRED = "Email and password are required"
MSG_INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Use case: authenticate a user by email and password."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> User:
        email = require_non_empty(email, MSG_CREDENTIALS_REQUIRED).lower()
        if not password:
            raise ValidationError(MSG_CREDENTIALS_REQUIRED)

        user = self._users.get_by_email(email)
        if not user:
            logger.info("Login rejected for unknown email %s", email)
            raise AuthenticationError(MSG_INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # placeholder or corrupted hash values
            ok = False

        if not ok:
            logger.info("Login rejected for user_id=%s", user.user_id)
            raise AuthenticationError(MSG_INVALID_CREDENTIALS)

        return user

    def get_profile(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise AuthenticationError("User not found")
        return user
