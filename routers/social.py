from typing import Annotated, List
from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import PlainTextResponse
import logging

from core.errors import GenerationError, StoreError
from dependencies import CurrentUser, StoreDep
from models import Like

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/like/{post_id}", response_class=PlainTextResponse)
def like_post(post_id: str, current_user: CurrentUser, store: StoreDep) -> str:
    """Like a post"""
    try:
        store.like_post(current_user.user_id, post_id)
    except (StoreError, GenerationError) as e:
        logger.error(f"Error liking post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Error liking post")
    return "liked"


@router.post("/unlike/{post_id}", response_class=PlainTextResponse)
def unlike_post(post_id: str, current_user: CurrentUser, store: StoreDep) -> str:
    """Remove the caller's like from a post"""
    try:
        store.unlike_post(current_user.user_id, post_id)
    except StoreError as e:
        logger.error(f"Error unliking post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Error unliking post")
    return "unliked"


@router.post("/get_likes", response_model=List[Like])
def get_likes(
    current_user: CurrentUser,
    store: StoreDep,
    post_id: Annotated[str, Form()] = "",
) -> List[Like]:
    """All likes on a post"""
    try:
        return store.post_likes(post_id)
    except StoreError as e:
        logger.error(f"Error getting likes for post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Error getting likes")


@router.post("/get_like_status/{post_id}", response_class=PlainTextResponse)
def get_like_status(post_id: str, current_user: CurrentUser, store: StoreDep) -> str:
    try:
        liked = store.is_liked(current_user.user_id, post_id)
    except StoreError as e:
        logger.error(f"Error checking like status for post {post_id}: {e}")
        liked = False
    return "true" if liked else "false"
