# models/user.py
from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import Boolean, String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from config.database import Base


class RoleEnum(str, enum.Enum):
    member = "member"
    admin = "admin"


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_user_id)
    email: Mapped[str] = mapped_column(String(150), unique=True, index=True, nullable=False)

    role: Mapped[RoleEnum] = mapped_column(
        SAEnum(RoleEnum, name="roleenum", native_enum=False, validate_strings=True),
        nullable=False,
        default=RoleEnum.member,
    )
    is_activated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Semilla TOTP: se genera al registrar y solo se devuelve esa vez
    otp_secret: Mapped[str] = mapped_column(String(64), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)
