"""Authentication module: resolves the caller identity from a bearer JWT."""
import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings

logger = logging.getLogger(__name__)


# HTTP Bearer token scheme. auto_error=False so anonymous requests reach the
# services, which decide whether an identity is required.
security = HTTPBearer(auto_error=False)

DEV_USER_ID = "dev|local-development-user"


def decode_jwt(token: str, settings: Settings) -> dict:
    """
    Decode and validate a bearer JWT.

    Raises:
        HTTPException: If token is invalid, expired, or has the wrong audience.
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )

    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except jwt.InvalidAudienceError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid audience",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except jwt.PyJWTError as e:
        logger.warning("JWT validation failed: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str | None:
    """
    Dependency that returns the caller's user id, or None for anonymous requests.

    In DEV_MODE, bypasses auth and returns the local development user.
    """
    if settings.dev_mode:
        return DEV_USER_ID

    if credentials is None:
        return None

    payload = decode_jwt(credentials.credentials, settings)

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing sub claim",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return str(user_id)
