from postboard.presentation.api.routers.posts import router as posts_router
from postboard.presentation.api.routers.users import router as users_router

__all__ = [
    "posts_router",
    "users_router",
]
