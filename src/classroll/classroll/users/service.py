from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ConstraintViolation, InvalidCredential, NotFound
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What the UI keeps after a successful login."""

    id: int
    name: str
    email: str


class AuthService:
    """Use case: register an account and log in."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, name: str, email: str, password: str) -> int:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email").lower()
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ConstraintViolation("Email is already registered")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
        )
        logger.info("Registered user id=%s", user_id)
        return user_id

    def login(self, *, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "Email").lower()
        user = self._users.get_by_email(email)
        if not user:
            logger.info("Login failed: unknown email %s", email)
            raise NotFound("User not found")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. hashes written by another tool in an unknown format
            ok = False

        if not ok:
            raise InvalidCredential("Invalid password")

        return SessionUser(id=user.id, name=user.name, email=user.email)
