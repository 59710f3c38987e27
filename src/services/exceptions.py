"""Shared exceptions for service layer operations."""
import functools
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


class ErrorKind(StrEnum):
    """Failure categories surfaced by the list and membership services."""

    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    INVALID_ARGUMENT = "invalid_argument"
    INTERNAL = "internal"


class ServiceError(Exception):
    """
    Base exception for list and membership operations.

    Every subclass carries a fixed ``kind`` and a human-readable message; the
    API layer maps the kind to an HTTP status.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthenticatedError(ServiceError):
    """Raised when no caller identity is present."""

    kind = ErrorKind.UNAUTHENTICATED
    default_message = "User is not authorized"


class NotFoundError(ServiceError):
    """Raised when a resource does not exist or no longer matches caller and id."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class ForbiddenError(ServiceError):
    """Raised when the caller does not own the resource."""

    kind = ErrorKind.FORBIDDEN
    default_message = "User is not allowed to access resource"


class InvalidArgumentError(ServiceError):
    """Raised when a request violates a list or membership rule."""

    kind = ErrorKind.INVALID_ARGUMENT
    default_message = "Invalid argument"


class InternalError(ServiceError):
    """Raised on unexpected store failures and broken data invariants."""

    kind = ErrorKind.INTERNAL


def translate_store_errors(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """
    Turn store failures raised by a service operation into InternalError.

    Service errors pass through unchanged. The original exception is logged
    and chained.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.exception("Store failure in %s", func.__qualname__)
            raise InternalError from e

    return wrapper
