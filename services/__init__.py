# services/__init__.py
from . import exercise_service, user_service

__all__ = ["exercise_service", "user_service"]
