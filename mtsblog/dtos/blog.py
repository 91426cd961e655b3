"""Blog write-result DTOs mirroring MongoDB's result documents."""

from pydantic import BaseModel, ConfigDict, Field


class BlogInsertResponse(BaseModel):
    acknowledged: bool
    inserted_id: str = Field(..., alias="insertedId")

    model_config = ConfigDict(populate_by_name=True)


class BlogUpdateResponse(BaseModel):
    acknowledged: bool
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")

    model_config = ConfigDict(populate_by_name=True)
