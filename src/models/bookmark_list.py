"""BookmarkList model for storing manual and smart bookmark lists."""
from enum import StrEnum
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin, UUIDv7Mixin

if TYPE_CHECKING:
    from models.bookmark_in_list import BookmarkInList


# Column widths; the configurable field limits may not exceed these.
NAME_COLUMN_LENGTH = 100
ICON_COLUMN_LENGTH = 100


class ListType(StrEnum):
    """Kind of list: curated by hand, or computed from a saved query."""

    MANUAL = "manual"
    SMART = "smart"


class BookmarkList(Base, UUIDv7Mixin, TimestampMixin):
    """
    BookmarkList model - a named, user-owned grouping of bookmarks.

    Manual lists hold explicit membership rows in bookmarks_in_lists.
    Smart lists carry a saved query instead and never have membership rows.
    """

    __tablename__ = "bookmark_lists"
    __table_args__ = (
        CheckConstraint(
            "query IS NULL OR type = 'smart'",
            name="ck_bookmark_lists_query_only_for_smart",
        ),
    )

    # id provided by UUIDv7Mixin
    user_id: Mapped[str] = mapped_column(
        String(255),
        index=True,
        comment="Owner of the list; set at creation and never reassigned",
    )
    name: Mapped[str] = mapped_column(String(NAME_COLUMN_LENGTH))
    icon: Mapped[str] = mapped_column(String(ICON_COLUMN_LENGTH))
    parent_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("bookmark_lists.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(10), default=ListType.MANUAL.value)
    query: Mapped[str | None] = mapped_column(Text, nullable=True)

    memberships: Mapped[list["BookmarkInList"]] = relationship(
        back_populates="bookmark_list",
        passive_deletes=True,
    )
