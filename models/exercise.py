"""
models/exercise.py - Modelo para la colección de ejercicios
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from config.database import Base


class Exercise(Base):
    """
    Ejercicio tal cual lo envía el cliente. `name` y `exercise_id` son
    únicos a nivel de índice: la BD es quien resuelve los duplicados.
    """
    __tablename__ = "exercises"

    # Clave interna: fija el orden de inserción para la paginación
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    exercise_id: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    gif_url: Mapped[str] = mapped_column(String(500), nullable=False)

    # Listas ordenadas (JSON conserva el orden tal cual)
    target_muscles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    body_parts: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    equipments: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    secondary_muscles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    instructions: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        """Devuelve el ejercicio con los nombres de campo públicos"""
        return {
            "exerciseId": self.exercise_id,
            "name": self.name,
            "gifUrl": self.gif_url,
            "targetMuscles": list(self.target_muscles or []),
            "bodyParts": list(self.body_parts or []),
            "equipments": list(self.equipments or []),
            "secondaryMuscles": list(self.secondary_muscles or []),
            "instructions": list(self.instructions or []),
        }
