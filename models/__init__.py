from .user import User, UserPublic, PrivateUser
from .post import Post, PostPublic, FullPost
from .like import Like
from .session import AuthSession
from .comment import Comment
from .follow import Follow

__all__ = [
    "User", "UserPublic", "PrivateUser",
    "Post", "PostPublic", "FullPost",
    "Like",
    "AuthSession",
    "Comment",
    "Follow",
]
