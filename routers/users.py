from typing import Annotated
from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import PlainTextResponse
import logging

from core.errors import NotFoundError, StoreError
from dependencies import CurrentUser, StoreDep
from models import UserPublic

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/user/{user_id}", response_model=UserPublic)
def get_user(user_id: str, store: StoreDep) -> UserPublic:
    """Public profile of any user"""
    try:
        return store.get_user(user_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except StoreError as e:
        logger.error(f"Error getting user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error getting user")


@router.post("/update_user", response_class=PlainTextResponse)
def update_user(
    current_user: CurrentUser,
    store: StoreDep,
    name: Annotated[str, Form()] = "",
    bio: Annotated[str, Form()] = "",
) -> str:
    """Overwrite the caller's name and bio"""
    try:
        store.update_user(current_user.user_id, name, bio)
    except StoreError as e:
        logger.error(f"Error updating user {current_user.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating user")
    return "User updated"
