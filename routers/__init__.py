# routers/__init__.py

from .exercises import router as exercises_router
from .users import router as users_router

__all__ = [
    "exercises_router",
    "users_router",
]
