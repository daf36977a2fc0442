"""User endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from mediashare.api.deps import SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import UserResponse
from mediashare.errors import MediaShareError
from mediashare.services import users as user_service

router = APIRouter(prefix="/users", tags=["Users"])


class CreateUserRequest(BaseModel):
    """Request to create a user."""

    username: str = Field(..., min_length=3, max_length=100, pattern=r"^[A-Za-z0-9_.-]+$")
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    full_name: str | None = Field(None, max_length=255)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(request: CreateUserRequest, session: SessionDep) -> UserResponse:
    try:
        user = user_service.create_user(
            session, request.username, request.email, request.full_name
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse, summary="Get user")
def get_user(user_id: str, session: SessionDep) -> UserResponse:
    try:
        user = user_service.get_user(session, user_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return UserResponse.model_validate(user)
