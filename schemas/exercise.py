# schemas/exercise.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, field_validator

_http_url = TypeAdapter(HttpUrl)


class ExerciseBase(BaseModel):
    exerciseId: str = Field(
        ...,
        min_length=1,
        title="Exercise ID",
        description="Unique identifier for the exercise.",
        examples=["KCBKjma"],
    )
    name: str = Field(
        ...,
        min_length=1,
        title="Exercise Name",
        description="The name of the exercise.",
        examples=["Band Jack Knife Sit-up"],
    )
    gifUrl: str = Field(
        ...,
        title="Exercise GIF URL",
        description="URL of the GIF demonstrating the exercise.",
        examples=["https://ucarecdn.com/05fcc879-04d4-4222-8896-e3772a8a3060/KCBKjma.gif"],
    )
    targetMuscles: List[str] = Field(
        ...,
        title="Target Muscles",
        description="Primary muscles targeted by the exercise.",
        examples=[["abs"]],
    )
    bodyParts: List[str] = Field(
        ...,
        title="Body Parts",
        description="Body parts involved in the exercise.",
        examples=[["waist", "back"]],
    )
    equipments: List[str] = Field(
        ...,
        title="Equipments",
        description="Equipment required to perform the exercise.",
        examples=[["band"]],
    )
    secondaryMuscles: List[str] = Field(
        ...,
        title="Secondary Muscles",
        description="Secondary muscles that are worked during the exercise.",
        examples=[["abs", "lats"]],
    )
    instructions: List[str] = Field(
        ...,
        title="Exercise Instructions",
        description="Step-by-step instructions to perform the exercise.",
        examples=[["Step 1: Start with...", "Step 2: Move into..."]],
    )


class ExerciseCreate(ExerciseBase):
    @field_validator("gifUrl")
    @classmethod
    def validate_gif_url(cls, v: str) -> str:
        # Se valida como URL pero se guarda el texto original (sin normalizar)
        try:
            _http_url.validate_python(v)
        except ValueError:
            raise ValueError("gifUrl debe ser una URL http(s) válida")
        return v


class ExerciseOut(ExerciseBase):
    pass


class ExercisePage(BaseModel):
    previousPage: Optional[str] = Field(
        None,
        description="Enlace a la página anterior (null en offset=0)",
        examples=["https://api.example.com/exercises?offset=0&limit=10"],
    )
    nextPage: Optional[str] = Field(
        None,
        description="Enlace a la página siguiente (null en offset=0)",
        examples=["https://api.example.com/exercises?offset=20&limit=10"],
    )
    currentPage: int = Field(..., ge=1, description="Página actual (1-based)", examples=[2])
    totalPages: int = Field(..., ge=0, description="Total de páginas para el limit pedido")
    totalExercises: int = Field(..., ge=0, description="Total de ejercicios guardados")
    exercises: List[ExerciseOut] = Field(default_factory=list, description="Array of Exercises.")
