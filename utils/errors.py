# utils/errors.py
"""
Errores de dominio que levantan los servicios.

Cada tipo lleva su código HTTP; `main.py` registra un único handler que
convierte cualquier `ServiceError` en `{"success": false, "error": ...}`.
"""
from __future__ import annotations


class ServiceError(Exception):
    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Datos de entrada inválidos"


class AuthenticationError(ServiceError):
    status_code = 401
    default_message = "Código de autenticación inválido o expirado"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Recurso no encontrado"


class ConflictError(ServiceError):
    status_code = 409
    default_message = "El recurso ya existe"


class InternalError(ServiceError):
    status_code = 500


__all__ = [
    "ServiceError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
]
