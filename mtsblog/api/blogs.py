"""Blog CRUD endpoints: direct pass-through to the blogs collection."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from mtsblog.api.deps import get_blog_repository
from mtsblog.core.exceptions import BadRequestError, BlogNotFoundError
from mtsblog.dtos import BlogInsertResponse, BlogUpdateResponse, MessageResponse
from mtsblog.repositories import BlogRepository

router = APIRouter(prefix="/blogs")


def _reject_id(document: Dict[str, Any]) -> Dict[str, Any]:
    if "_id" in document:
        raise BadRequestError("Blog documents may not set '_id'")
    return document


@router.get("", response_model=List[Dict[str, Any]])
def list_blogs(repo: BlogRepository = Depends(get_blog_repository)):
    return repo.list()


@router.get("/{blog_id}", response_model=Dict[str, Any])
def get_blog(blog_id: str, repo: BlogRepository = Depends(get_blog_repository)):
    blog = repo.get_by_id(blog_id)
    if blog is None:
        raise BlogNotFoundError()
    return blog


@router.post(
    "",
    response_model=BlogInsertResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_blog(
    document: Dict[str, Any] = Body(...),
    repo: BlogRepository = Depends(get_blog_repository),
):
    result = repo.insert(_reject_id(document))
    return BlogInsertResponse(
        acknowledged=result.acknowledged, inserted_id=str(result.inserted_id)
    )


@router.put("/{blog_id}", response_model=BlogUpdateResponse)
def update_blog(
    blog_id: str,
    fields: Dict[str, Any] = Body(...),
    repo: BlogRepository = Depends(get_blog_repository),
):
    """Merge the given fields into an existing blog."""
    if not fields:
        raise BadRequestError("No fields to update")
    result = repo.update(blog_id, _reject_id(fields))
    if result.matched_count == 0:
        raise BlogNotFoundError()
    return BlogUpdateResponse(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
    )


@router.delete("/{blog_id}", response_model=MessageResponse)
def delete_blog(blog_id: str, repo: BlogRepository = Depends(get_blog_repository)):
    if not repo.delete(blog_id):
        raise BlogNotFoundError()
    return MessageResponse(message="Blog deleted")
