# services/exercise_service.py
from __future__ import annotations

import math
from typing import Any, Dict

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.exercise import Exercise
from schemas.exercise import ExerciseCreate
from utils.errors import ConflictError, ValidationError
from utils.logging_utils import setup_logger

logger = setup_logger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# offset + limit tiene que caber en un entero SQL de 64 bits
MAX_OFFSET = 2**63 - 1 - MAX_LIMIT


def create_exercise(db: Session, data: ExerciseCreate) -> Dict[str, Any]:
    """Guarda un ejercicio nuevo. Nombre o exerciseId repetido -> ConflictError"""
    e = Exercise(
        exercise_id=data.exerciseId,
        name=data.name,
        gif_url=data.gifUrl,
        target_muscles=list(data.targetMuscles),
        body_parts=list(data.bodyParts),
        equipments=list(data.equipments),
        secondary_muscles=list(data.secondaryMuscles),
        instructions=list(data.instructions),
    )
    db.add(e)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Ejercicio duplicado: name=%r exerciseId=%r", data.name, data.exerciseId)
        raise ConflictError(f"Ya existe un ejercicio con el nombre '{data.name}' o el id '{data.exerciseId}'")
    db.refresh(e)

    logger.info("Ejercicio creado: %s (%s)", e.name, e.exercise_id)
    return e.to_dict()


def list_exercises(db: Session, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Dict[str, Any]:
    """
    Devuelve una ventana de ejercicios en orden de inserción junto con el
    descriptor de página (currentPage empieza en 1).
    """
    if not 0 <= offset <= MAX_OFFSET:
        raise ValidationError(f"offset debe estar entre 0 y {MAX_OFFSET}")
    if not 1 <= limit <= MAX_LIMIT:
        raise ValidationError(f"limit debe estar entre 1 y {MAX_LIMIT}")

    total = db.scalar(select(func.count()).select_from(Exercise)) or 0
    rows = db.scalars(
        select(Exercise).order_by(Exercise.pk).offset(offset).limit(limit)
    ).all()

    return {
        "currentPage": offset // limit + 1,
        "totalPages": math.ceil(total / limit),
        "totalExercises": total,
        "exercises": [r.to_dict() for r in rows],
    }
