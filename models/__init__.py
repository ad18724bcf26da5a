# models/__init__.py
from .user import User, RoleEnum
from .exercise import Exercise

__all__ = [
    "User",
    "RoleEnum",
    "Exercise",
]
