"""Repository exports."""

from .base import BaseRepository, CollectionName, MongoRepositoryBase, to_object_id
from .blog import BlogRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "BlogRepository",
    "CollectionName",
    "MongoRepositoryBase",
    "UserRepository",
    "to_object_id",
]
