# schemas/user.py
from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator


class RegisterIn(BaseModel):
    email: EmailStr = Field(
        ...,
        title="Email",
        description="Email for account register",
        examples=["johndoe@example.com"],
    )


class UserOut(BaseModel):
    id: str = Field(..., title="user Id", description="user unique identifier")
    email: str = Field(..., title="user email", description="user email address")
    role: str = Field(..., title="user role", description="user active role", examples=["member"])
    isActivated: bool = Field(..., title="activation status", description="user account activation status")
    otpSecret: str = Field(
        ...,
        title="Otp Secret",
        description="otp secret for adding in authenticator app (solo se devuelve al registrar)",
    )


class AuthenticateIn(BaseModel):
    email: EmailStr = Field(
        ...,
        title="Email",
        description="user registered email address",
        examples=["johndoe@example.com"],
    )
    code: str = Field(
        ...,
        min_length=1,
        title="Authenticator code",
        description="code generated by Authenticator app",
        examples=["123456"],
    )

    @field_validator("code")
    @classmethod
    def strip_code(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("code no puede estar vacío")
        return v


class AccessTokenOut(BaseModel):
    accessToken: str = Field(
        ...,
        title="Access token",
        description="access token for making post requests",
    )
