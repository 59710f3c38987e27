"""Tests for the list and bookmark ownership guards."""
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from models.bookmark_list import BookmarkList
from services.bookmark_service import authorize_bookmark
from services.exceptions import ForbiddenError, NotFoundError, UnauthenticatedError
from services.list_ownership import authorize_list
from tests.conftest import FAKE_UUID, USER_A, USER_B


class TestAuthorizeList:
    """Tests for authorize_list."""

    async def test__authorize_list__owner_passes(
        self,
        db_session: AsyncSession,
        manual_list: BookmarkList,
    ) -> None:
        """The owner is allowed and nothing is returned."""
        assert await authorize_list(db_session, USER_A, manual_list.id) is None

    async def test__authorize_list__other_user_forbidden(
        self,
        db_session: AsyncSession,
        manual_list: BookmarkList,
    ) -> None:
        """A different authenticated user is forbidden."""
        with pytest.raises(ForbiddenError, match="not allowed"):
            await authorize_list(db_session, USER_B, manual_list.id)

    async def test__authorize_list__missing_list_not_found(
        self,
        db_session: AsyncSession,
    ) -> None:
        """An unknown id is reported as not found."""
        with pytest.raises(NotFoundError, match="List not found"):
            await authorize_list(db_session, USER_A, FAKE_UUID)

    async def test__authorize_list__anonymous_existing_list(
        self,
        db_session: AsyncSession,
        manual_list: BookmarkList,
    ) -> None:
        """Anonymous callers are unauthenticated for existing lists."""
        with pytest.raises(UnauthenticatedError):
            await authorize_list(db_session, None, manual_list.id)

    async def test__authorize_list__anonymous_missing_list(
        self,
        db_session: AsyncSession,
    ) -> None:
        """Anonymous callers get the same error for ids that do not exist."""
        with pytest.raises(UnauthenticatedError):
            await authorize_list(db_session, None, FAKE_UUID)


class TestAuthorizeBookmark:
    """Tests for authorize_bookmark."""

    async def test__authorize_bookmark__owner_passes(
        self,
        db_session: AsyncSession,
        user_a_bookmark: Bookmark,
    ) -> None:
        """The owner is allowed."""
        assert await authorize_bookmark(db_session, USER_A, user_a_bookmark.id) is None

    async def test__authorize_bookmark__other_user_forbidden(
        self,
        db_session: AsyncSession,
        user_a_bookmark: Bookmark,
    ) -> None:
        """A different authenticated user is forbidden."""
        with pytest.raises(ForbiddenError):
            await authorize_bookmark(db_session, USER_B, user_a_bookmark.id)

    async def test__authorize_bookmark__missing_bookmark_not_found(
        self,
        db_session: AsyncSession,
    ) -> None:
        """An unknown id is reported as not found."""
        with pytest.raises(NotFoundError, match="Bookmark not found"):
            await authorize_bookmark(db_session, USER_A, FAKE_UUID)

    async def test__authorize_bookmark__anonymous(
        self,
        db_session: AsyncSession,
        user_a_bookmark: Bookmark,
    ) -> None:
        """Anonymous callers are unauthenticated."""
        with pytest.raises(UnauthenticatedError):
            await authorize_bookmark(db_session, None, user_a_bookmark.id)
