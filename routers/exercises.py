# routers/exercises.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from schemas.common import ErrorResponse, SuccessResponse
from schemas.exercise import ExerciseCreate, ExerciseOut, ExercisePage
from services.exercise_service import DEFAULT_LIMIT, MAX_LIMIT, MAX_OFFSET, create_exercise, list_exercises
from utils.dependencies import get_db, require_write_token

router = APIRouter(prefix="/exercises", tags=["Exercises"])


def _page_link(request: Request, offset: int, limit: int) -> str:
    return str(request.url.replace(query=f"offset={offset}&limit={limit}"))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[List[ExerciseOut]],
    operation_id="createExercise",
    summary="Add a new exercises to the database",
    description="This route is used to add a new exercises to database.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - The input data for the exercise is invalid or incomplete."},
        401: {"model": ErrorResponse, "description": "Unauthorized - missing or invalid access token (solo con EXERCISES_REQUIRE_AUTH)."},
        409: {"model": ErrorResponse, "description": "Conflict - An exercise with the same name already exists in the database."},
        500: {"model": ErrorResponse, "description": "Internal Server Error - An unexpected error occurred on the server."},
    },
)
def create(
    body: ExerciseCreate,
    db: Session = Depends(get_db),
    _token: Optional[dict] = Depends(require_write_token),
):
    record = create_exercise(db, body)
    return {"success": True, "data": [record]}


@router.get(
    "",
    response_model=SuccessResponse[ExercisePage],
    operation_id="getExercises",
    summary="Retrive all exercises.",
    description="Retrive list of all the exercises.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - offset/limit fuera de rango."},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def list_(
    request: Request,
    offset: int = Query(0, ge=0, le=MAX_OFFSET, description="Number of exercises to skip", examples=[10]),
    limit: int = Query(
        DEFAULT_LIMIT, ge=1, le=MAX_LIMIT,
        description="Maximum number of exercises to return", examples=[10],
    ),
    db: Session = Depends(get_db),
):
    page = list_exercises(db, offset=offset, limit=limit)

    # Con offset=0 no se emiten enlaces aunque haya más datos (comportamiento heredado)
    previous_page = _page_link(request, max(offset - limit, 0), limit) if offset else None
    next_page = _page_link(request, offset + limit, limit) if offset else None

    return {
        "success": True,
        "data": {"previousPage": previous_page, "nextPage": next_page, **page},
    }
