# utils/dependencies.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Header

from config import settings
from config.database import get_db
from utils.errors import AuthenticationError
from utils.security import decode_token

__all__ = ["get_db", "require_write_token"]


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise AuthenticationError("Falta header Authorization Bearer")
    return authorization.split(" ", 1)[1].strip()


# -------------------------------
# Autenticación para escrituras
# -------------------------------
def require_write_token(
    authorization: Optional[str] = Header(None),
) -> Optional[Dict[str, Any]]:
    """
    Exige el accessToken de /authenticate en las escrituras solo si
    EXERCISES_REQUIRE_AUTH está activo. Devuelve el payload o None.
    """
    if not settings.EXERCISES_REQUIRE_AUTH:
        return None

    token = _bearer_token(authorization)
    try:
        payload = decode_token(token)
    except ValueError as e:
        raise AuthenticationError(str(e))

    if not payload.get("sub"):
        raise AuthenticationError("Token sin 'sub'")
    return payload
