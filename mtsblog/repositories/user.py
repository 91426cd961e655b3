"""User repository for database operations"""

from datetime import datetime, timezone
from typing import List, Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from mtsblog.core.exceptions import DuplicateUserError
from mtsblog.models.entities.user import Role, User
from .base import BaseRepository, CollectionName

# Never hand the stored hash (current or legacy key) to a listing
PUBLIC_PROJECTION = {"password_hash": 0, "password": 0}


class UserRepository(BaseRepository[User]):
    """Repository for user accounts keyed by email"""

    def __init__(self, db: Database):
        super().__init__(db, CollectionName.USERS, User)

    def ensure_indexes(self) -> None:
        """Create the unique email index backing the one-user-per-email rule."""
        try:
            self.collection.create_index("email", unique=True)
        except PyMongoError as exc:
            raise self._storage_error("create email index", exc) from exc

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email"""
        return self.find_one({"email": email})

    def exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def insert(self, user: User) -> str:
        """Insert a new user and return its id as a string.

        Raises DuplicateUserError when the unique email index rejects the
        document, which happens if a concurrent registration won the race.
        """
        doc = user.to_mongo()
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise DuplicateUserError() from exc
        except PyMongoError as exc:
            raise self._storage_error("insert user", exc) from exc
        return str(result.inserted_id)

    def update_role(self, user_id: str, role: Role) -> int:
        """Set the role of a user and return the number of matched documents."""
        return self.update_fields(
            user_id, {"role": role, "updated_at": datetime.now(timezone.utc)}
        )

    def list_all(self) -> List[User]:
        """List all users without their password hashes"""
        return self.find_many({}, projection=PUBLIC_PROJECTION)
