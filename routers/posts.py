from typing import Annotated
from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
import logging

from core.errors import GenerationError, NotFoundError, StoreError, ValidationError
from core.metrics import posts_created_total
from dependencies import CurrentUser, StoreDep
from models import FullPost
from routers.pages import templates

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/create_post", response_class=PlainTextResponse)
def create_post(
    current_user: CurrentUser,
    store: StoreDep,
    content: Annotated[str, Form()] = "",
) -> str:
    """Create a post and return its id"""
    if not content.strip():
        raise ValidationError("Content cannot be empty")

    try:
        post_id = store.create_post(current_user.user_id, content)
    except (StoreError, GenerationError) as e:
        logger.error(f"Error creating post: {e}")
        raise HTTPException(status_code=500, detail="Error creating post")

    posts_created_total.inc()
    return post_id


@router.get("/post/{post_id}", response_model=FullPost)
def get_full_post(post_id: str, store: StoreDep) -> FullPost:
    """A post with its author and likes"""
    try:
        return store.get_full_post(post_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except StoreError as e:
        logger.error(f"Error getting post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Error getting post")


@router.post("/get_posts", response_class=HTMLResponse)
def get_own_posts(request: Request, current_user: CurrentUser, store: StoreDep):
    """Render the caller's posts, newest first"""
    try:
        posts = store.get_posts_by_user(current_user.user_id)
    except StoreError as e:
        logger.error(f"Error getting posts for {current_user.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Error getting posts")

    return templates.TemplateResponse(request, "post.html", {"posts": posts})
