"""Service layer for adding bookmarks to and removing them from manual lists."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from db import list_store, membership_store
from db.membership_store import InsertOutcome
from models.bookmark_list import BookmarkList, ListType
from services.bookmark_service import authorize_bookmark
from services.exceptions import (
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    translate_store_errors,
)
from services.list_ownership import authorize_list

logger = logging.getLogger(__name__)


async def _authorize_list_and_bookmark(
    db: AsyncSession,
    user_id: str | None,
    list_id: UUID,
    bookmark_id: UUID,
) -> None:
    """Run the list guard, then the bookmark guard. The first failure wins."""
    await authorize_list(db, user_id, list_id)
    await authorize_bookmark(db, user_id, bookmark_id)


@translate_store_errors
async def add_bookmark_to_list(
    db: AsyncSession,
    user_id: str | None,
    list_id: UUID,
    bookmark_id: UUID,
) -> None:
    """
    Add a bookmark to a manual list.

    Raises:
        InvalidArgumentError: The list is a smart list, or the bookmark is
            already in the list.
        InternalError: The store failed for any other reason.
    """
    await _authorize_list_and_bookmark(db, user_id, list_id, bookmark_id)

    bookmark_list = await list_store.find_list(db, list_id, user_id)
    if bookmark_list is None:
        raise NotFoundError("List not found")
    if bookmark_list.type == ListType.SMART:
        raise InvalidArgumentError("Smart lists cannot be added to")

    outcome = await membership_store.insert_membership(db, list_id, bookmark_id)
    if outcome is InsertOutcome.DUPLICATE:
        raise InvalidArgumentError(
            f"Bookmark {bookmark_id} is already in the list {list_id}",
        )


@translate_store_errors
async def remove_bookmark_from_list(
    db: AsyncSession,
    user_id: str | None,
    list_id: UUID,
    bookmark_id: UUID,
) -> None:
    """
    Remove a bookmark from a list.

    Removing a pair that is not stored is a client error, not a not-found:
    smart lists never have stored pairs, so they fail here as well.
    """
    await _authorize_list_and_bookmark(db, user_id, list_id, bookmark_id)

    deleted = await membership_store.delete_membership(db, list_id, bookmark_id)
    if deleted == 0:
        raise InvalidArgumentError(
            f"Bookmark {bookmark_id} is already not in list {list_id}",
        )


@translate_store_errors
async def get_lists_of_bookmark(
    db: AsyncSession,
    user_id: str | None,
    bookmark_id: UUID,
) -> list[BookmarkList]:
    """
    Get the lists a bookmark belongs to.

    Only the bookmark guard applies. Every list found must belong to the
    caller; a foreign list means membership rows crossed an ownership
    boundary, and the request fails instead of hiding the row.
    """
    await authorize_bookmark(db, user_id, bookmark_id)

    lists = await membership_store.find_lists_of_bookmark(db, bookmark_id)
    foreign = [lst.id for lst in lists if lst.user_id != user_id]
    if foreign:
        logger.error(
            "Bookmark %s of user %s is in lists owned by other users: %s",
            bookmark_id,
            user_id,
            foreign,
        )
        raise InternalError
    return lists
