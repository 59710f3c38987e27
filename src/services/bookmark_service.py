"""Service layer for the bookmark records that lists point at."""
import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from services.exceptions import (
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    translate_store_errors,
)

logger = logging.getLogger(__name__)


@translate_store_errors
async def authorize_bookmark(
    db: AsyncSession,
    caller_id: str | None,
    bookmark_id: UUID,
) -> None:
    """
    Check that ``caller_id`` owns the bookmark.

    Same contract as the list guard: Unauthenticated, then NotFound, then
    Forbidden.
    """
    result = await db.execute(
        select(Bookmark.user_id).where(Bookmark.id == bookmark_id),
    )
    owner_id = result.scalar_one_or_none()

    if caller_id is None:
        raise UnauthenticatedError
    if owner_id is None:
        raise NotFoundError("Bookmark not found")
    if owner_id != caller_id:
        logger.warning(
            "User %s denied access to bookmark %s", caller_id, bookmark_id,
        )
        raise ForbiddenError
