"""Bookmark list CRUD and membership endpoints."""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user_id
from schemas.bookmark_list import (
    BookmarkListCreate,
    BookmarkListResponse,
    BookmarkListsResponse,
    BookmarkListUpdate,
)
from services import bookmark_list_service, list_membership_service

router = APIRouter(prefix="/lists", tags=["lists"])


@router.post("/", response_model=BookmarkListResponse, status_code=201)
async def create_list(
    data: BookmarkListCreate,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListResponse:
    """
    Create a new bookmark list.

    Manual lists hold bookmarks added explicitly; smart lists require a query.
    """
    bookmark_list = await bookmark_list_service.create_list(db, current_user_id, data)
    return BookmarkListResponse.model_validate(bookmark_list)


@router.get("/", response_model=BookmarkListsResponse)
async def get_lists(
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListsResponse:
    """Get all bookmark lists for the current user."""
    lists = await bookmark_list_service.get_lists(db, current_user_id)
    return BookmarkListsResponse(
        lists=[BookmarkListResponse.model_validate(lst) for lst in lists],
    )


@router.get("/{list_id}", response_model=BookmarkListResponse)
async def get_list(
    list_id: UUID,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListResponse:
    """Get a specific bookmark list by ID."""
    bookmark_list = await bookmark_list_service.get_list(db, current_user_id, list_id)
    return BookmarkListResponse.model_validate(bookmark_list)


@router.patch("/{list_id}", response_model=BookmarkListResponse)
async def update_list(
    list_id: UUID,
    data: BookmarkListUpdate,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListResponse:
    """Update a bookmark list. Only smart lists accept a query."""
    bookmark_list = await bookmark_list_service.update_list(
        db, current_user_id, list_id, data,
    )
    return BookmarkListResponse.model_validate(bookmark_list)


@router.delete("/{list_id}", status_code=204)
async def delete_list(
    list_id: UUID,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """
    Delete a bookmark list.

    Bookmarks in the list are not deleted, only their membership.
    """
    await bookmark_list_service.delete_list(db, current_user_id, list_id)


@router.put("/{list_id}/bookmarks/{bookmark_id}", status_code=204)
async def add_bookmark_to_list(
    list_id: UUID,
    bookmark_id: UUID,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Add a bookmark to a manual list."""
    await list_membership_service.add_bookmark_to_list(
        db, current_user_id, list_id, bookmark_id,
    )


@router.delete("/{list_id}/bookmarks/{bookmark_id}", status_code=204)
async def remove_bookmark_from_list(
    list_id: UUID,
    bookmark_id: UUID,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Remove a bookmark from a list."""
    await list_membership_service.remove_bookmark_from_list(
        db, current_user_id, list_id, bookmark_id,
    )
