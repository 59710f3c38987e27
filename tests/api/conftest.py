"""Shared fixtures for API tests."""
from uuid import UUID

import jwt
from httpx import AsyncClient

from tests.conftest import TEST_JWT_SECRET


def auth_headers(user_id: str) -> dict[str, str]:
    """Build an Authorization header carrying a signed token for ``user_id``."""
    token = jwt.encode({"sub": user_id}, TEST_JWT_SECRET, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}


async def create_list_via_api(
    client: AsyncClient,
    user_id: str,
    name: str = "Reading",
    **fields: object,
) -> dict:
    """Create a list through the API and return the response body."""
    response = await client.post(
        "/lists/",
        json={"name": name, "icon": "📚", **fields},
        headers=auth_headers(user_id),
    )
    assert response.status_code == 201, response.text
    return response.json()


def list_url(list_id: str | UUID, bookmark_id: str | UUID | None = None) -> str:
    """URL for a list, or for one bookmark's membership in it."""
    if bookmark_id is None:
        return f"/lists/{list_id}"
    return f"/lists/{list_id}/bookmarks/{bookmark_id}"
