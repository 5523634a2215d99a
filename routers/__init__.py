from .auth import router as auth_router
from .pages import router as pages_router
from .users import router as users_router
from .posts import router as posts_router
from .social import router as social_router

__all__ = [
    "auth_router",
    "pages_router",
    "users_router",
    "posts_router",
    "social_router",
]
