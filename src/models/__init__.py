"""SQLAlchemy models."""
from models.base import Base, TimestampMixin, UUIDv7Mixin
from models.bookmark import Bookmark
from models.bookmark_list import BookmarkList, ListType
from models.bookmark_in_list import BookmarkInList

__all__ = [
    "Base",
    "Bookmark",
    "BookmarkInList",
    "BookmarkList",
    "ListType",
    "TimestampMixin",
    "UUIDv7Mixin",
]
