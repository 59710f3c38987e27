"""Readiness check for the list store."""
import logging
from typing import Literal

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import literal, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_async_session
from models import Bookmark, BookmarkInList, BookmarkList

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

# Tables every list and membership operation reads
CHECKED_TABLES = (BookmarkList.__table__, BookmarkInList.__table__, Bookmark.__table__)


class HealthResponse(BaseModel):
    """Readiness of the list store."""

    status: Literal["ok", "unavailable"]
    unreachable: list[str] = []


@router.get("/health", response_model=HealthResponse)
async def health_check(
    response: Response,
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Report whether each table the list operations use can be queried.

    Returns 503 naming the unreachable tables, so a missing migration shows up
    here instead of on the first request.
    """
    unreachable: list[str] = []
    for table in CHECKED_TABLES:
        try:
            async with db.begin_nested():
                await db.execute(select(literal(1)).select_from(table).limit(1))
        except SQLAlchemyError:
            logger.exception("Health check failed for table %s", table.name)
            unreachable.append(table.name)

    if unreachable:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="unavailable", unreachable=unreachable)
    return HealthResponse(status="ok")
