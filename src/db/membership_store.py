"""Store adapter for bookmark-in-list membership rows."""
from enum import StrEnum
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark_in_list import MEMBERSHIP_PK_NAME, BookmarkInList
from models.bookmark_list import BookmarkList

# PostgreSQL names the violated constraint; SQLite names the table columns.
_DUPLICATE_MARKERS = (
    MEMBERSHIP_PK_NAME,
    "UNIQUE constraint failed: bookmarks_in_lists.",
)


class InsertOutcome(StrEnum):
    """Result of inserting a membership row."""

    INSERTED = "inserted"
    DUPLICATE = "duplicate"


def is_duplicate_membership(error: IntegrityError) -> bool:
    """Whether an IntegrityError is the (list_id, bookmark_id) key violation."""
    message = str(error.orig) if error.orig is not None else str(error)
    return any(marker in message for marker in _DUPLICATE_MARKERS)


async def insert_membership(
    db: AsyncSession,
    list_id: UUID,
    bookmark_id: UUID,
) -> InsertOutcome:
    """
    Insert a (list, bookmark) row.

    Runs inside a SAVEPOINT so a key violation leaves the rest of the unit of
    work intact. A duplicate pair is reported as InsertOutcome.DUPLICATE; any
    other integrity failure is re-raised.
    """
    try:
        async with db.begin_nested():
            await db.execute(
                insert(BookmarkInList).values(list_id=list_id, bookmark_id=bookmark_id),
            )
    except IntegrityError as e:
        if is_duplicate_membership(e):
            return InsertOutcome.DUPLICATE
        raise
    return InsertOutcome.INSERTED


async def delete_membership(
    db: AsyncSession,
    list_id: UUID,
    bookmark_id: UUID,
) -> int:
    """Delete a (list, bookmark) row. Returns the number of rows deleted."""
    stmt = (
        delete(BookmarkInList)
        .where(
            BookmarkInList.list_id == list_id,
            BookmarkInList.bookmark_id == bookmark_id,
        )
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    return result.rowcount


async def find_lists_of_bookmark(
    db: AsyncSession,
    bookmark_id: UUID,
) -> list[BookmarkList]:
    """Join a bookmark's membership rows to the lists they belong to."""
    query = (
        select(BookmarkList)
        .join(BookmarkInList, BookmarkInList.list_id == BookmarkList.id)
        .where(BookmarkInList.bookmark_id == bookmark_id)
        .order_by(BookmarkInList.added_at, BookmarkList.id)
    )
    result = await db.execute(query)
    return list(result.scalars().all())
