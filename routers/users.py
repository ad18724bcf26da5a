# routers/users.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from schemas.common import ErrorResponse, SuccessResponse
from schemas.user import AccessTokenOut, AuthenticateIn, RegisterIn, UserOut
from services.user_service import authenticate, create_user
from utils.dependencies import get_db

router = APIRouter(tags=["Users"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[UserOut],
    operation_id="registerUser",
    summary="register users endpoint",
    description="This route is used to register user account.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad request - Invalid input data"},
        409: {"model": ErrorResponse, "description": "Conflict - email already exists"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    return {"success": True, "data": create_user(db, body.email)}


@router.post(
    "/authenticate",
    response_model=SuccessResponse[AccessTokenOut],
    operation_id="authenticateUser",
    summary="User Authentication",
    description="This route is used to authenticate user based on email and authenticator code.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad request - Invalid input data"},
        401: {"model": ErrorResponse, "description": "Invalid or expired authenticator code"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def authenticate_user(body: AuthenticateIn, db: Session = Depends(get_db)):
    return {"success": True, "data": authenticate(db, body.email, body.code)}
