"""Password hashing with bcrypt."""

from __future__ import annotations

import logging

import bcrypt

from mtsblog.config import settings
from mtsblog.core.exceptions import HashingError

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted one-way hashing of user passwords.

    ``rounds`` is bcrypt's log2 work factor; every extra round doubles the
    cost of both hashing and verifying.
    """

    def __init__(self, rounds: int | None = None):
        self.rounds = rounds if rounds is not None else settings.BCRYPT_ROUNDS

    def hash(self, plaintext: str) -> str:
        encoded = plaintext.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            raise HashingError(
                f"Password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes and cannot be hashed"
            )
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(encoded, salt).decode("utf-8")
        except (ValueError, MemoryError) as exc:
            raise HashingError(f"Could not hash password: {exc}") from exc

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True when ``plaintext`` matches ``hashed``.

        A mismatch is a normal outcome and returns False. Only a stored hash
        that bcrypt cannot parse raises ``HashingError``.
        """
        encoded = plaintext.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            # Never accepted by hash(), so it cannot match anything stored
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError as exc:
            logger.error("Stored password hash is not a valid bcrypt hash")
            raise HashingError("Stored password hash is malformed") from exc


def get_password_hasher() -> PasswordHasher:
    """FastAPI dependency returning a hasher with the configured work factor."""
    return PasswordHasher()
