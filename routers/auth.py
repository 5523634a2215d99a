from typing import Annotated
from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import PlainTextResponse
import logging

from auth.security import verify_password
from core.config import get_settings
from core.errors import GenerationError, HashingError, NotFoundError, StoreError, ValidationError
from core.metrics import sessions_created_total, users_created_total
from dependencies import StoreDep, get_session_cookie, set_session_cookie
from store import Store

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


def start_session(store: Store, user_id: str) -> str:
    try:
        session_id = store.create_session(user_id)
    except (StoreError, GenerationError) as e:
        logger.error(f"Error creating session for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error creating session")
    sessions_created_total.inc()
    return session_id


@router.post("/signup", response_class=PlainTextResponse)
def signup(
    store: StoreDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """Create an account and log it in"""
    if not email or not password:
        raise ValidationError("Email or password missing")

    try:
        user_id = store.create_user(email, password)
    except (StoreError, HashingError, GenerationError) as e:
        logger.error(f"Error creating user: {e}")
        raise HTTPException(status_code=500, detail="Error creating user")
    users_created_total.inc()

    # the user row is kept even if the session cannot be created
    session_id = start_session(store, user_id)

    response = PlainTextResponse("User created")
    set_session_cookie(response, session_id)
    return response


@router.post("/login", response_class=PlainTextResponse)
def login(
    store: StoreDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """Check credentials and issue a new session cookie"""
    if not email or not password:
        raise ValidationError("Email or password missing")

    try:
        user = store.get_user_by_email(email)
    except NotFoundError:
        raise HTTPException(status_code=400, detail="Incorrect email or password")
    except StoreError as e:
        logger.error(f"Error getting user for login: {e}")
        raise HTTPException(status_code=500, detail="Error getting user")

    try:
        password_matches = verify_password(password, user.password)
    except HashingError:
        raise HTTPException(status_code=500, detail="Error getting user")

    if not password_matches:
        raise HTTPException(status_code=400, detail="Incorrect email or password")

    session_id = start_session(store, user.id)

    response = PlainTextResponse("User logged in")
    set_session_cookie(response, session_id)
    return response


@router.post("/logout", response_class=PlainTextResponse)
def logout(request: Request, store: StoreDep):
    """Delete the current session and clear the cookie"""
    session_id = get_session_cookie(request)
    if session_id is not None:
        try:
            store.delete_session(session_id)
        except StoreError as e:
            logger.error(f"Error deleting session: {e}")
            raise HTTPException(status_code=500, detail="Error logging out")

    response = PlainTextResponse("User logged out")
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME, path="/", domain=settings.COOKIE_DOMAIN
    )
    return response


@router.get("/get_auth", response_class=PlainTextResponse)
def get_auth(request: Request, store: StoreDep) -> str:
    """Return the id of the user owning the session cookie"""
    session_id = get_session_cookie(request)
    if session_id is None:
        raise HTTPException(status_code=400, detail="Session cookie not found")

    try:
        return store.get_session(session_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except StoreError as e:
        logger.error(f"Error resolving session: {e}")
        raise HTTPException(status_code=500, detail="Error getting user")
