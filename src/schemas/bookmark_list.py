"""Pydantic schemas for bookmark list endpoints."""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from models.bookmark_list import ListType
from schemas.validators import validate_list_icon, validate_list_name, validate_list_query


class BookmarkListCreate(BaseModel):
    """
    Schema for creating a new bookmark list.

    Smart lists must carry a query; manual lists must not.
    """

    name: str
    icon: str
    parent_id: UUID | None = None
    type: ListType = ListType.MANUAL
    query: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        """Validate list name."""
        return validate_list_name(v)

    @field_validator("icon")
    @classmethod
    def check_icon(cls, v: str) -> str:
        """Validate list icon."""
        return validate_list_icon(v)

    @field_validator("query")
    @classmethod
    def check_query(cls, v: str | None) -> str | None:
        """Validate query text."""
        return validate_list_query(v)

    @model_validator(mode="after")
    def check_query_matches_type(self) -> "BookmarkListCreate":
        """Enforce that only smart lists have a query, and that they always do."""
        if self.type == ListType.SMART and self.query is None:
            raise ValueError("Smart lists must have a query")
        if self.type == ListType.MANUAL and self.query is not None:
            raise ValueError("Manual lists cannot have a query")
        return self


class BookmarkListUpdate(BaseModel):
    """
    Schema for updating an existing bookmark list.

    Only fields present in the request are applied. ``parent_id`` may be set to
    null to detach a list from its parent; ``query`` may not be cleared.
    """

    name: str | None = None
    icon: str | None = None
    parent_id: UUID | None = None
    query: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str | None) -> str:
        """Validate list name; null is not a valid name."""
        if v is None:
            raise ValueError("List name cannot be null")
        return validate_list_name(v)

    @field_validator("icon")
    @classmethod
    def check_icon(cls, v: str | None) -> str:
        """Validate list icon; null is not a valid icon."""
        if v is None:
            raise ValueError("List icon cannot be null")
        return validate_list_icon(v)

    @field_validator("query")
    @classmethod
    def check_query(cls, v: str | None) -> str:
        """Validate query text; an explicit null would leave a smart list without one."""
        if v is None:
            raise ValueError("Query cannot be null")
        return validate_list_query(v)


class BookmarkListResponse(BaseModel):
    """Schema for bookmark list responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    icon: str
    parent_id: UUID | None
    type: ListType
    query: str | None
    created_at: datetime
    updated_at: datetime


class BookmarkListsResponse(BaseModel):
    """Schema for a collection of bookmark lists."""

    lists: list[BookmarkListResponse]
