"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import bookmarks, health, lists
from core.config import get_settings
from services.exceptions import ErrorKind, ServiceError


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Configure logging at startup."""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield


# HTTP status for each service error kind
ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.INTERNAL: 500,
}

app = FastAPI(
    title="Bookmark Lists API",
    description="Manual and smart bookmark lists with owner-scoped membership.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(ServiceError)
async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Translate service errors into JSON responses with a matching status code."""
    headers = None
    if exc.kind is ErrorKind.UNAUTHENTICATED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=ERROR_STATUS_CODES[exc.kind],
        content={"detail": exc.message, "code": exc.kind.value},
        headers=headers,
    )


app.include_router(health.router)
app.include_router(lists.router)
app.include_router(bookmarks.router)
