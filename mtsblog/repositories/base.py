"""Base repository pattern for MongoDB operations"""

from abc import ABC
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from bson import ObjectId
from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from mtsblog.core.exceptions import InvalidIdentifierError, StorageError


class CollectionName(str, Enum):
    BLOGS = "blogs"
    USERS = "users"


def to_object_id(value: Union[str, ObjectId]) -> ObjectId:
    """Convert a client-supplied id to ObjectId, rejecting malformed values."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise InvalidIdentifierError(value)


class MongoRepositoryBase:
    """Shared collection wiring and error translation for repositories."""

    def __init__(self, db: Database, collection_name: Union[CollectionName, str]):
        self.db = db
        self.collection_name: str = (
            collection_name.value
            if isinstance(collection_name, CollectionName)
            else collection_name
        )
        self.collection: Collection = db[self.collection_name]

    def _storage_error(self, action: str, exc: PyMongoError) -> StorageError:
        return StorageError(f"Failed to {action} in '{self.collection_name}': {exc}")

    @staticmethod
    def _serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Return a JSON-ready copy of a raw document."""
        if doc is None:
            return None
        data = dict(doc)
        if isinstance(data.get("_id"), ObjectId):
            data["_id"] = str(data["_id"])
        return data


T = TypeVar("T", bound=BaseModel)


class BaseRepository(MongoRepositoryBase, ABC, Generic[T]):
    """Base repository mapping documents to a pydantic model."""

    def __init__(
        self,
        db: Database,
        collection_name: Union[CollectionName, str],
        model_class: Type[T],
    ):
        super().__init__(db, collection_name)
        self.model_class = model_class

    def find_one(
        self, query: Dict[str, Any], projection: Optional[Dict[str, Any]] = None
    ) -> Optional[T]:
        try:
            doc = self.collection.find_one(query, projection)
        except PyMongoError as exc:
            raise self._storage_error("read document", exc) from exc
        return self._to_model(doc)

    def find_many(
        self,
        query: Dict[str, Any],
        projection: Optional[Dict[str, Any]] = None,
        sort: Optional[List[tuple]] = None,
    ) -> List[T]:
        try:
            cursor = self.collection.find(query, projection)
            if sort:
                cursor = cursor.sort(sort)
            docs = list(cursor)
        except PyMongoError as exc:
            raise self._storage_error("read documents", exc) from exc
        return [self._to_model(doc) for doc in docs]

    def update_fields(
        self, entity_id: Union[str, ObjectId], update_data: Dict[str, Any]
    ) -> int:
        """``$set`` fields on one document and return the matched count."""
        identifier = to_object_id(entity_id)
        try:
            result = self.collection.update_one(
                {"_id": identifier}, {"$set": update_data}
            )
        except PyMongoError as exc:
            raise self._storage_error("update document", exc) from exc
        return result.matched_count

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        if not doc:
            return None
        return self.model_class.model_validate(doc)
