"""
Shared validation functions for Pydantic schemas.

Length limits come from Settings so deployments can tune them without code changes.
"""
from core.config import get_settings


def validate_list_name(name: str) -> str:
    """
    Validate a list name.

    Returns:
        The trimmed name.

    Raises:
        ValueError: If name is empty or too long.
    """
    settings = get_settings()
    trimmed = name.strip()
    if not trimmed:
        raise ValueError("List name cannot be empty")
    if len(trimmed) > settings.max_list_name_length:
        raise ValueError(
            f"List name exceeds maximum length of {settings.max_list_name_length} characters "
            f"(got {len(trimmed)} characters).",
        )
    return trimmed


def validate_list_icon(icon: str) -> str:
    """Validate that a list icon is present and not too long."""
    settings = get_settings()
    if not icon:
        raise ValueError("List icon cannot be empty")
    if len(icon) > settings.max_list_icon_length:
        raise ValueError(
            f"List icon exceeds maximum length of {settings.max_list_icon_length} characters "
            f"(got {len(icon)} characters).",
        )
    return icon


def validate_list_query(query: str | None) -> str | None:
    """Validate a smart list query: non-blank and within the length limit."""
    if query is None:
        return None
    settings = get_settings()
    if not query.strip():
        raise ValueError("Query cannot be empty")
    if len(query) > settings.max_list_query_length:
        max_len = settings.max_list_query_length
        raise ValueError(
            f"Query exceeds maximum length of {max_len:,} characters "
            f"(got {len(query):,} characters).",
        )
    return query
