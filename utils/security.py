# utils/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import pyotp
from jose import jwt, ExpiredSignatureError, JWTError

from config import settings

# ============================================================
# OTP (TOTP compatible con Google Authenticator, Authy, ...)
# ============================================================

def generate_otp_secret() -> str:
    """Secreto base32 nuevo para sembrar la app autenticadora."""
    return pyotp.random_base32()


def verify_otp_code(secret: str, code: str) -> bool:
    """
    Valida un código TOTP (pasos de 30 s) aceptando `OTP_VALID_WINDOW`
    pasos de desfase hacia cada lado.
    """
    code = (code or "").strip().replace(" ", "")
    if not code.isdigit():
        return False
    return pyotp.TOTP(secret).verify(code, valid_window=settings.OTP_VALID_WINDOW)


# ============================================================
# JWT
# ============================================================

def create_token(data: Dict[str, Any], expires_in: Optional[int] = None) -> str:
    """
    Crea un JWT firmado. 'data' debe incluir al menos 'sub' (id de usuario).
    """
    now = datetime.now(timezone.utc)
    if expires_in is None:
        expires_in = settings.JWT_EXPIRES_IN

    # Normaliza 'sub' a string
    if "sub" in data:
        data = {**data, "sub": str(data["sub"])}

    payload: Dict[str, Any] = {
        **data,
        "iat": now,
        "nbf": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_token(token: str, leeway_seconds: int = 10) -> Dict[str, Any]:
    """
    Valida y decodifica un JWT. Lanza ValueError con mensaje claro si es inválido/expirado.
    """
    options: Dict[str, Any] = {
        "require_exp": True,
        "require_iat": True,
        "leeway": leeway_seconds,
    }
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
            options=options,
        )
    except ExpiredSignatureError:
        raise ValueError("El token ha expirado")
    except JWTError:
        raise ValueError("Token inválido")

    if "sub" in payload:
        payload["sub"] = str(payload["sub"])
    return payload
