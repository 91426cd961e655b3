"""Blog repository: pass-through CRUD over schema-less documents."""

from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.results import InsertOneResult, UpdateResult

from mtsblog.core.exceptions import BadRequestError
from .base import CollectionName, MongoRepositoryBase, to_object_id

# Raised by the BSON encoder for values it cannot store (e.g. ints over 8 bytes)
UNENCODABLE_ERRORS = (OverflowError, InvalidDocument)


class BlogRepository(MongoRepositoryBase):
    """Blogs carry no schema, so documents stay plain dicts."""

    def __init__(self, db: Database):
        super().__init__(db, CollectionName.BLOGS)

    def list(self) -> List[Dict[str, Any]]:
        try:
            docs = list(self.collection.find())
        except PyMongoError as exc:
            raise self._storage_error("list blogs", exc) from exc
        return [self._serialize(doc) for doc in docs]

    def get_by_id(self, blog_id: Union[str, ObjectId]) -> Optional[Dict[str, Any]]:
        identifier = to_object_id(blog_id)
        try:
            doc = self.collection.find_one({"_id": identifier})
        except PyMongoError as exc:
            raise self._storage_error("read blog", exc) from exc
        return self._serialize(doc)

    def insert(self, document: Dict[str, Any]) -> InsertOneResult:
        # insert_one adds _id to the dict it is given
        doc = dict(document)
        try:
            return self.collection.insert_one(doc)
        except UNENCODABLE_ERRORS as exc:
            raise BadRequestError(f"Blog cannot be stored: {exc}") from exc
        except PyMongoError as exc:
            raise self._storage_error("insert blog", exc) from exc

    def update(
        self, blog_id: Union[str, ObjectId], fields: Dict[str, Any]
    ) -> UpdateResult:
        """Merge ``fields`` into the stored blog."""
        identifier = to_object_id(blog_id)
        try:
            return self.collection.update_one({"_id": identifier}, {"$set": fields})
        except UNENCODABLE_ERRORS as exc:
            raise BadRequestError(f"Blog fields cannot be stored: {exc}") from exc
        except PyMongoError as exc:
            raise self._storage_error("update blog", exc) from exc

    def delete(self, blog_id: Union[str, ObjectId]) -> bool:
        identifier = to_object_id(blog_id)
        try:
            result = self.collection.delete_one({"_id": identifier})
        except PyMongoError as exc:
            raise self._storage_error("delete blog", exc) from exc
        return result.deleted_count > 0
