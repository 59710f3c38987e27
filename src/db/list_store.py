"""Store adapter for bookmark list rows."""
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark_list import BookmarkList


async def insert_list(db: AsyncSession, **values: Any) -> BookmarkList:
    """Insert a list row and return it with its generated id and timestamps."""
    bookmark_list = BookmarkList(**values)
    db.add(bookmark_list)
    await db.flush()
    await db.refresh(bookmark_list)
    return bookmark_list


async def find_list_owner(db: AsyncSession, list_id: UUID) -> str | None:
    """Return the owner id of a list, or None if the list does not exist."""
    query = select(BookmarkList.user_id).where(BookmarkList.id == list_id)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def find_list(
    db: AsyncSession,
    list_id: UUID,
    user_id: str,
) -> BookmarkList | None:
    """Get a single list by ID, scoped to its owner."""
    query = (
        select(BookmarkList)
        .where(
            BookmarkList.id == list_id,
            BookmarkList.user_id == user_id,
        )
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def find_lists(db: AsyncSession, user_id: str) -> list[BookmarkList]:
    """Get all lists owned by a user, oldest first."""
    query = (
        select(BookmarkList)
        .where(BookmarkList.user_id == user_id)
        .order_by(BookmarkList.created_at, BookmarkList.id)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def update_list_where(
    db: AsyncSession,
    list_id: UUID,
    user_id: str,
    values: dict[str, Any],
) -> BookmarkList | None:
    """
    Update a list if it still matches id and owner.

    The predicate is evaluated by the UPDATE itself, so a list deleted after
    an earlier read yields None rather than a stale object.
    """
    stmt = (
        update(BookmarkList)
        .where(
            BookmarkList.id == list_id,
            BookmarkList.user_id == user_id,
        )
        .values(**values, updated_at=func.now())
        .returning(BookmarkList)
        .execution_options(populate_existing=True, synchronize_session=False)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def delete_list_where(db: AsyncSession, list_id: UUID, user_id: str) -> int:
    """Delete a list matching id and owner. Returns the number of rows deleted."""
    stmt = (
        delete(BookmarkList)
        .where(
            BookmarkList.id == list_id,
            BookmarkList.user_id == user_id,
        )
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    return result.rowcount
