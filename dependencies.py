from dataclasses import dataclass
from typing import Annotated
from uuid import uuid4
import logging
from time import time

import structlog
from fastapi import Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import get_settings
from core.errors import AuthenticationError, NotFoundError, ValidationError
from store import Store

settings = get_settings()
logger = logging.getLogger(__name__)
access_logger = structlog.get_logger("murmur.access")


# Store dependency
def get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Service unavailable")
    return store

StoreDep = Annotated[Store, Depends(get_store)]


# Authentication dependencies
@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from the session cookie"""
    user_id: str
    session_id: str


def get_session_cookie(request: Request) -> str | None:
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None


def get_authenticated_user(request: Request, store: StoreDep) -> AuthenticatedUser:
    session_id = get_session_cookie(request)
    if session_id is None:
        raise AuthenticationError("Session cookie missing")
    try:
        user_id = store.get_session(session_id)
    except NotFoundError as e:
        raise AuthenticationError("Session not found") from e
    return AuthenticatedUser(user_id=user_id, session_id=session_id)

CurrentUser = Annotated[AuthenticatedUser, Depends(get_authenticated_user)]


def set_session_cookie(response, session_id: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=settings.SESSION_COOKIE_MAX_AGE,
        path="/",
        domain=settings.COOKIE_DOMAIN,
        secure=settings.COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )


# Middleware
async def log_requests(request: Request, call_next):
    start_time = time()
    response = await call_next(request)
    process_time = time() - start_time

    access_logger.info(
        "request",
        path=request.url.path,
        method=request.method,
        status=response.status_code,
        process_time=f"{process_time:.3f}s",
    )
    return response


# Error handlers
def setup_error_handlers(app):
    @app.exception_handler(AuthenticationError)
    async def authentication_exception_handler(request: Request, exc: AuthenticationError):
        logger.info(f"Unauthenticated request to {request.url.path}: {exc.message}")
        return RedirectResponse(url="/auth", status_code=status.HTTP_302_FOUND)

    @app.exception_handler(ValidationError)
    async def input_exception_handler(request: Request, exc: ValidationError):
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return PlainTextResponse("Invalid request", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid4())
        logger.error(
            f"Unhandled error {error_id}: {str(exc)}",
            exc_info=True,
            extra={
                "path": request.url.path,
                "method": request.method,
                "error_id": error_id,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred", "error_id": error_id},
        )
