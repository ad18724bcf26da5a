# services/user_service.py
from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.user import User, RoleEnum
from utils.errors import AuthenticationError, ConflictError, NotFoundError
from utils.logging_utils import setup_logger
from utils.security import create_token, generate_otp_secret, verify_otp_code

logger = setup_logger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _role_str(user: User) -> str:
    r = user.role
    return r.value if hasattr(r, "value") else str(r)


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == _normalize_email(email))).first()


def create_user(db: Session, email: str) -> Dict[str, Any]:
    """
    Registra un usuario con rol por defecto y sin activar. El otpSecret en
    claro solo sale en esta respuesta, para darlo de alta en la app.
    """
    u = User(
        email=_normalize_email(email),
        role=RoleEnum.member,
        is_activated=False,
        otp_secret=generate_otp_secret(),
    )
    db.add(u)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Registro con email ya existente: %s", u.email)
        raise ConflictError("El email ya está registrado")
    db.refresh(u)

    logger.info("Usuario registrado: id=%s", u.id)
    return {
        "id": u.id,
        "email": u.email,
        "role": _role_str(u),
        "isActivated": u.is_activated,
        "otpSecret": u.otp_secret,
    }


def authenticate(db: Session, email: str, code: str) -> Dict[str, str]:
    """Valida el código TOTP del usuario y emite un accessToken"""
    user = get_by_email(db, email)
    if not user:
        raise NotFoundError("Usuario no encontrado")

    if not verify_otp_code(user.otp_secret, code):
        logger.info("Código OTP inválido para usuario id=%s", user.id)
        raise AuthenticationError("Código de autenticación inválido o expirado")

    token = create_token({"sub": user.id, "email": user.email, "role": _role_str(user)})
    return {"accessToken": token}
