# schemas/__init__.py
from .common import SuccessResponse, ErrorResponse
from .exercise import ExerciseCreate, ExerciseOut, ExercisePage
from .user import RegisterIn, UserOut, AuthenticateIn, AccessTokenOut


__all__ = [
    # Sobres
    "SuccessResponse",
    "ErrorResponse",

    # Ejercicios
    "ExerciseCreate",
    "ExerciseOut",
    "ExercisePage",

    # Usuarios
    "RegisterIn",
    "UserOut",
    "AuthenticateIn",
    "AccessTokenOut",
]
