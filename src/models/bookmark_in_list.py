"""Join table linking bookmarks to manual lists."""
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, PrimaryKeyConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.bookmark import Bookmark
    from models.bookmark_list import BookmarkList


MEMBERSHIP_PK_NAME = "bookmarks_in_lists_pkey"


class BookmarkInList(Base):
    """
    Membership row: bookmark ``bookmark_id`` is in list ``list_id``.

    The composite primary key makes each (list, bookmark) pair unique. Rows are
    removed by the database when either side is deleted.
    """

    __tablename__ = "bookmarks_in_lists"
    __table_args__ = (
        PrimaryKeyConstraint("list_id", "bookmark_id", name=MEMBERSHIP_PK_NAME),
    )

    list_id: Mapped[UUID] = mapped_column(
        ForeignKey("bookmark_lists.id", ondelete="CASCADE"),
    )
    bookmark_id: Mapped[UUID] = mapped_column(
        ForeignKey("bookmarks.id", ondelete="CASCADE"),
        index=True,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    bookmark_list: Mapped["BookmarkList"] = relationship(back_populates="memberships")
    bookmark: Mapped["Bookmark"] = relationship(back_populates="list_memberships")
