"""Service layer for bookmark list operations."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from db import list_store
from models.bookmark_list import BookmarkList, ListType
from schemas.bookmark_list import BookmarkListCreate, BookmarkListUpdate
from services.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    UnauthenticatedError,
    translate_store_errors,
)
from services.list_ownership import authorize_list

logger = logging.getLogger(__name__)


def _check_query_for_type(list_type: str, query: str | None) -> None:
    """Raise if ``query`` is not allowed for a list of ``list_type``."""
    if query is not None and list_type != ListType.SMART:
        raise InvalidArgumentError("Manual lists cannot have a query")
    if query is None and list_type == ListType.SMART:
        raise InvalidArgumentError("Smart lists must have a query")


async def _check_parent(
    db: AsyncSession,
    user_id: str,
    parent_id: UUID,
    list_id: UUID | None = None,
) -> None:
    """
    Validate a parent reference.

    The parent must be one of the caller's lists, and for an existing list the
    new parent may not be the list itself or one of its descendants.
    """
    if list_id is not None and parent_id == list_id:
        raise InvalidArgumentError("A list cannot be its own parent")

    ancestor_id: UUID | None = parent_id
    seen: set[UUID] = set()
    while ancestor_id is not None and ancestor_id not in seen:
        seen.add(ancestor_id)
        ancestor = await list_store.find_list(db, ancestor_id, user_id)
        if ancestor is None:
            if ancestor_id == parent_id:
                raise InvalidArgumentError(f"Parent list {parent_id} not found")
            break
        if list_id is not None and ancestor.parent_id == list_id:
            raise InvalidArgumentError("A list cannot be nested under its own descendant")
        ancestor_id = ancestor.parent_id


@translate_store_errors
async def create_list(
    db: AsyncSession,
    user_id: str | None,
    data: BookmarkListCreate,
) -> BookmarkList:
    """
    Create a new bookmark list owned by ``user_id``.

    No ownership check is needed for a new resource, but the caller must be
    authenticated.
    """
    if user_id is None:
        raise UnauthenticatedError
    _check_query_for_type(data.type, data.query)
    if data.parent_id is not None:
        await _check_parent(db, user_id, data.parent_id)

    bookmark_list = await list_store.insert_list(
        db,
        user_id=user_id,
        name=data.name,
        icon=data.icon,
        parent_id=data.parent_id,
        type=data.type.value,
        query=data.query,
    )
    logger.info("Created %s list %s for user %s", data.type, bookmark_list.id, user_id)
    return bookmark_list


@translate_store_errors
async def get_lists(db: AsyncSession, user_id: str | None) -> list[BookmarkList]:
    """Get all bookmark lists for a user, ordered by creation date."""
    if user_id is None:
        raise UnauthenticatedError
    return await list_store.find_lists(db, user_id)


@translate_store_errors
async def get_list(
    db: AsyncSession,
    user_id: str | None,
    list_id: UUID,
) -> BookmarkList:
    """Get a single bookmark list by ID after checking ownership."""
    await authorize_list(db, user_id, list_id)
    bookmark_list = await list_store.find_list(db, list_id, user_id)
    if bookmark_list is None:
        raise NotFoundError("List not found")
    return bookmark_list


@translate_store_errors
async def update_list(
    db: AsyncSession,
    user_id: str | None,
    list_id: UUID,
    data: BookmarkListUpdate,
) -> BookmarkList:
    """
    Apply a partial update to a bookmark list.

    Only fields set on ``data`` are written. Setting a query is only allowed
    on smart lists; the list type is re-read for that decision. The write is
    filtered by id and owner, so a list deleted concurrently raises NotFoundError.
    """
    await authorize_list(db, user_id, list_id)

    update_data = data.model_dump(exclude_unset=True)

    if "query" in update_data:
        current = await list_store.find_list(db, list_id, user_id)
        if current is None:
            raise NotFoundError("List not found")
        _check_query_for_type(current.type, update_data["query"])

    if update_data.get("parent_id") is not None:
        await _check_parent(db, user_id, update_data["parent_id"], list_id)

    bookmark_list = await list_store.update_list_where(db, list_id, user_id, update_data)
    if bookmark_list is None:
        logger.warning("List %s disappeared before update", list_id)
        raise NotFoundError("List not found")
    return bookmark_list


@translate_store_errors
async def delete_list(
    db: AsyncSession,
    user_id: str | None,
    list_id: UUID,
) -> None:
    """
    Delete a bookmark list.

    Membership rows are removed by the database cascade, and child lists are
    detached (their parent_id is cleared).
    """
    await authorize_list(db, user_id, list_id)
    deleted = await list_store.delete_list_where(db, list_id, user_id)
    if deleted == 0:
        logger.warning("List %s disappeared before delete", list_id)
        raise NotFoundError("List not found")
    logger.info("Deleted list %s for user %s", list_id, user_id)
