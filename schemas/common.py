# schemas/common.py
from __future__ import annotations

from typing import Generic, TypeVar, Literal

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Sobre común de las respuestas correctas: {success: true, data: ...}"""
    success: Literal[True] = Field(
        True,
        description="Indica si la petición se completó correctamente",
        examples=[True],
    )
    data: T


class ErrorResponse(BaseModel):
    success: Literal[False] = Field(False, examples=[False])
    error: str = Field(..., description="Mensaje de error legible", examples=["Internal Server Error"])
