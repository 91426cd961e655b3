"""Registration, login and role management for user accounts.

Pure business logic with no HTTP dependencies: failures are raised as
``mtsblog.core.exceptions`` types and mapped to status codes by the API layer.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mtsblog.config import settings
from mtsblog.core.exceptions import (
    BadRequestError,
    DuplicateUserError,
    IncorrectPasswordError,
    InvalidRoleError,
    MissingFieldError,
    UserNotFoundError,
)
from mtsblog.core.security import BCRYPT_MAX_PASSWORD_BYTES, PasswordHasher
from mtsblog.dtos import UserResponse, UserView
from mtsblog.models.entities.user import ROLES, User
from mtsblog.repositories.base import to_object_id
from mtsblog.repositories.user import UserRepository

logger = logging.getLogger(__name__)


def _missing(**fields: Optional[str]) -> List[str]:
    return [name for name, value in fields.items() if not value]


def _check_role(role: Optional[str]) -> str:
    if role not in ROLES:
        raise InvalidRoleError(f"Invalid role: {role!r}; expected one of {', '.join(ROLES)}")
    return role


class AuthService:
    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self.users = users
        self.hasher = hasher

    def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        role: Optional[str] = None,
    ) -> str:
        """Create an account and return its id.

        Raises:
            MissingFieldError: name, email or password is absent or empty
            InvalidRoleError: role is given but not ``user`` or ``admin``
            BadRequestError: password is longer than bcrypt can hash
            DuplicateUserError: an account already uses this email
        """
        missing = _missing(name=name, email=email, password=password)
        if missing:
            raise MissingFieldError("Name, email and password are required", missing)

        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise BadRequestError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )

        if role is None:
            role = settings.DEFAULT_USER_ROLE
        if role is not None:
            _check_role(role)

        # Fast path for the sequential case; the unique index covers races.
        if self.users.exists(email):
            raise DuplicateUserError()

        user = User(
            name=name,
            email=email,
            password_hash=self.hasher.hash(password),
            role=role,
        )
        user_id = self.users.insert(user)
        logger.info("Registered user", extra={"user_id": user_id})
        return user_id

    def login(self, email: Optional[str], password: Optional[str]) -> UserView:
        """Check credentials and return the public view of the account."""
        missing = _missing(email=email, password=password)
        if missing:
            raise MissingFieldError("Email and password are required", missing)

        user = self.users.find_by_email(email)
        if user is None:
            raise UserNotFoundError()

        if not user.password_hash or not self.hasher.verify(password, user.password_hash):
            logger.info("Rejected login with wrong password", extra={"user_id": str(user.id)})
            raise IncorrectPasswordError()

        return UserView(name=user.name, email=user.email, role=user.role)

    def update_role(self, user_id: str, role: Optional[str]) -> None:
        role = _check_role(role)
        to_object_id(user_id)

        matched = self.users.update_role(user_id, role)
        if matched == 0:
            raise UserNotFoundError()
        logger.info("Updated user role", extra={"user_id": user_id, "role": role})

    def list_users(self) -> List[UserResponse]:
        """List all users"""
        return [
            UserResponse.model_validate(user.model_dump(by_alias=True))
            for user in self.users.list_all()
        ]
