"""In-memory stand-ins for the Mongo-backed repositories."""

from typing import Dict, List, Optional

from bson import ObjectId

from mtsblog.core.exceptions import DuplicateUserError
from mtsblog.models.entities.user import User
from mtsblog.repositories.base import to_object_id


class InMemoryUserRepository:
    """Mirrors UserRepository, including the unique email index."""

    def __init__(self):
        self.docs: Dict[ObjectId, User] = {}

    def find_by_email(self, email: str) -> Optional[User]:
        for user in self.docs.values():
            if user.email == email:
                return user.model_copy()
        return None

    def exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def insert(self, user: User) -> str:
        if any(existing.email == user.email for existing in self.docs.values()):
            raise DuplicateUserError()
        user_id = ObjectId()
        self.docs[user_id] = user.model_copy(update={"id": user_id})
        return str(user_id)

    def update_role(self, user_id: str, role: str) -> int:
        identifier = to_object_id(user_id)
        if identifier not in self.docs:
            return 0
        self.docs[identifier] = self.docs[identifier].model_copy(update={"role": role})
        return 1

    def list_all(self) -> List[User]:
        return [
            user.model_copy(update={"password_hash": None})
            for user in self.docs.values()
        ]
