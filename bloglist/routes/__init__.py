from bloglist.routes.auth import router as auth_router
from bloglist.routes.blog import router as blogs_router
from bloglist.routes.user import router as users_router

__all__ = ["auth_router", "blogs_router", "users_router"]
