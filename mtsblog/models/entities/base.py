from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


def coerce_object_id(v: Any) -> ObjectId:
    """Accept an ObjectId or its 24-hex string form."""
    if isinstance(v, ObjectId):
        return v
    if isinstance(v, str) and ObjectId.is_valid(v):
        return ObjectId(v)
    raise ValueError(f"Invalid ObjectId: {v!r}")


# Stored as ObjectId, rendered as a string in JSON
PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(coerce_object_id),
    PlainSerializer(str, return_type=str, when_used="json"),
]

# For DTOs that always carry the string form
PyObjectIdStr = Annotated[str, BeforeValidator(lambda v: str(coerce_object_id(v)))]


class BaseEntity(BaseModel):
    """Fields shared by every stored document"""

    id: Optional[PyObjectId] = Field(None, alias="_id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    def to_mongo(self):
        """Convert to MongoDB document"""
        return self.model_dump(by_alias=True, exclude_none=True)
