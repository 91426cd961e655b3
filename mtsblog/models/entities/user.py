"""User entity - represents a registered account in the database"""

import logging
from typing import Any, Literal, Optional

from pydantic import field_validator, model_validator

from .base import BaseEntity

logger = logging.getLogger(__name__)

Role = Literal["user", "admin"]
ROLES = ("user", "admin")

# Prefix shared by every bcrypt hash ($2a$, $2b$, $2y$)
BCRYPT_PREFIX = "$2"


class User(BaseEntity):
    name: str
    email: str
    # Absent when loaded through a projection that strips it
    password_hash: Optional[str] = None
    role: Optional[Role] = None

    @model_validator(mode="before")
    @classmethod
    def adopt_legacy_password(cls, data: Any) -> Any:
        """Older documents keep the bcrypt hash under ``password``."""
        if isinstance(data, dict) and not data.get("password_hash"):
            legacy = data.get("password")
            if isinstance(legacy, str) and legacy.startswith(BCRYPT_PREFIX):
                data = {**data, "password_hash": legacy}
        return data

    @field_validator("role", mode="before")
    @classmethod
    def drop_unknown_role(cls, value: Any) -> Any:
        # Writes are checked by AuthService; stored data may predate that check
        if value is not None and value not in ROLES:
            logger.warning("Ignoring unknown stored role", extra={"role": value})
            return None
        return value
