from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.classroll.classroll.core.exceptions import ConstraintViolation, InvalidCredential, NotFound, ValidationError
from src.classroll.classroll.users.model import User
from src.classroll.classroll.users.service import AuthService, SessionUser


@dataclass
class InMemoryUsers:
    users_by_email: dict[str, User] = field(default_factory=dict)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.users_by_email.get(email)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users_by_email.values() if u.id == user_id), None)

    def create_user(self, *, name: str, email: str, password_hash: str) -> int:
        user_id = len(self.users_by_email) + 1
        self.users_by_email[email] = User(id=user_id, name=name, email=email, password_hash=password_hash)
        return user_id


def test_register_hashes_password_and_login_succeeds():
    users = InMemoryUsers()
    auth = AuthService(users)

    user_id = auth.register(name="Teacher", email="Teacher@School.test", password="secret1")

    stored = users.get_by_email("teacher@school.test")
    assert stored.password_hash != "secret1"
    assert auth.login(email="teacher@school.test", password="secret1") == SessionUser(
        id=user_id, name="Teacher", email="teacher@school.test"
    )


def test_login_unknown_email_is_not_found():
    auth = AuthService(InMemoryUsers())

    with pytest.raises(NotFound, match="User not found"):
        auth.login(email="nobody@school.test", password="whatever")


def test_login_wrong_password_raises():
    user = User(id=1, name="A", email="a@school.test", password_hash=generate_password_hash("right-one"))
    auth = AuthService(InMemoryUsers({"a@school.test": user}))

    with pytest.raises(InvalidCredential, match="Invalid password"):
        auth.login(email="a@school.test", password="wrong")


def test_register_duplicate_email_is_a_constraint_violation():
    auth = AuthService(InMemoryUsers())
    auth.register(name="A", email="a@school.test", password="secret1")

    with pytest.raises(ConstraintViolation):
        auth.register(name="B", email="a@school.test", password="secret2")


def test_register_short_password_is_rejected():
    with pytest.raises(ValidationError):
        AuthService(InMemoryUsers()).register(name="A", email="a@school.test", password="123")


def test_sqlite_unique_email_maps_to_constraint_violation(container):
    container.users_repo.create_user(name="A", email="a@school.test", password_hash="x")

    with pytest.raises(ConstraintViolation):
        container.users_repo.create_user(name="B", email="a@school.test", password_hash="y")
