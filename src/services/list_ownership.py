"""Ownership guard for bookmark lists."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from db import list_store
from services.exceptions import (
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    translate_store_errors,
)

logger = logging.getLogger(__name__)


@translate_store_errors
async def authorize_list(
    db: AsyncSession,
    caller_id: str | None,
    list_id: UUID,
) -> None:
    """
    Check that ``caller_id`` may act on the list.

    Performs one read and holds no lock; callers that mutate must re-check
    ownership in their own write predicate.

    Checks run in a fixed order so anonymous callers learn nothing about which
    ids exist.

    Raises:
        UnauthenticatedError: No caller identity.
        NotFoundError: The list does not exist.
        ForbiddenError: The list belongs to someone else.
    """
    owner_id = await list_store.find_list_owner(db, list_id)

    if caller_id is None:
        raise UnauthenticatedError
    if owner_id is None:
        raise NotFoundError("List not found")
    if owner_id != caller_id:
        logger.warning("User %s denied access to list %s", caller_id, list_id)
        raise ForbiddenError
