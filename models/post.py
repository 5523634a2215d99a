from datetime import datetime, timezone
from typing import List

from sqlmodel import Field, SQLModel

from .like import Like
from .user import UserPublic


class PostBase(SQLModel):
    content: str


class Post(PostBase, table=True):
    __tablename__ = "posts"

    id: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PostPublic(PostBase):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class FullPost(SQLModel):
    """A post together with its author and its likes. Never stored."""
    post: PostPublic
    user: UserPublic
    likes: List[Like] = []
