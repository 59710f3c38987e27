"""Bookmark endpoints exposed by the lists service."""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user_id
from schemas.bookmark_list import BookmarkListResponse, BookmarkListsResponse
from services import list_membership_service

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("/{bookmark_id}/lists", response_model=BookmarkListsResponse)
async def get_lists_of_bookmark(
    bookmark_id: UUID,
    current_user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkListsResponse:
    """Get the manual lists a bookmark has been added to."""
    lists = await list_membership_service.get_lists_of_bookmark(
        db, current_user_id, bookmark_id,
    )
    return BookmarkListsResponse(
        lists=[BookmarkListResponse.model_validate(lst) for lst in lists],
    )
