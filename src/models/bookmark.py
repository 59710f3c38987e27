"""Bookmark model for storing user bookmarks."""
from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin, UUIDv7Mixin

if TYPE_CHECKING:
    from models.bookmark_in_list import BookmarkInList


class Bookmark(Base, UUIDv7Mixin, TimestampMixin):
    """
    Bookmark model - stores URLs owned by a user.

    Only the columns needed for ownership checks and list membership joins
    live here; bookmark content is managed elsewhere.
    """

    __tablename__ = "bookmarks"

    # id provided by UUIDv7Mixin
    user_id: Mapped[str] = mapped_column(String(255), index=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)

    list_memberships: Mapped[list["BookmarkInList"]] = relationship(
        back_populates="bookmark",
        passive_deletes=True,
    )
